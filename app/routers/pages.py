from fastapi import APIRouter, Depends
from app.models.union import Union
from app.schemas.common import PlaceholderPage, UnionSummary
from app.core.union_context import get_admin_union

router = APIRouter()


def _placeholder(union: Union, feature: str) -> PlaceholderPage:
    return PlaceholderPage(
        union=UnionSummary.model_validate(union),
        items=[],
        message=f"{feature} are coming soon.",
    )


@router.get("/{slug}/payments", response_model=PlaceholderPage)
def get_payments(union: Union = Depends(get_admin_union)):
    """Payment history and dues. Not built yet; always empty."""
    return _placeholder(union, "Payments")


@router.get("/{slug}/grievances", response_model=PlaceholderPage)
def get_grievances(union: Union = Depends(get_admin_union)):
    """Grievance tracking. Not built yet; always empty."""
    return _placeholder(union, "Grievances")
