"""Routes listing the role and major reference tables."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.application.use_cases import list_majors as list_majors_uc
from backoffice.application.use_cases import list_roles as list_roles_uc
from backoffice.infrastructure.database import get_db
from backoffice.interfaces.api.schemas import ReferenceRead

router = APIRouter(tags=["references"])


@router.get("/roles", response_model=list[ReferenceRead])
def list_roles(db: Session = Depends(get_db)):
    return [ReferenceRead.model_validate(role) for role in list_roles_uc(db)]


@router.get("/majors", response_model=list[ReferenceRead])
def list_majors(db: Session = Depends(get_db)):
    return [ReferenceRead.model_validate(major) for major in list_majors_uc(db)]


__all__ = ["router"]
