import logging
import sys

def setup_logging():
    """
    Configure logging for the application.
    
    Everything goes to stdout so container platforms pick it up. SQLAlchemy's
    engine logger is kept at WARNING to avoid echoing every statement.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    return logging.getLogger("unionsimple")


# Create global logger instance
logger = setup_logging()
