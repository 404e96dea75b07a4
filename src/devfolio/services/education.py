"""Education service."""

from __future__ import annotations

from devfolio.schemas.common import check_row_dates
from devfolio.schemas.education import EducationCreate, EducationUpdate
from devfolio.services.crud import TableService

education_service = TableService(
    table="education",
    create_schema=EducationCreate,
    update_schema=EducationUpdate,
    order_by="start_date",
    owner_column="user_id",
    row_check=check_row_dates,
)
