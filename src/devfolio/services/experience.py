"""Work experience service."""

from __future__ import annotations

from devfolio.schemas.common import check_row_dates
from devfolio.schemas.experience import ExperienceCreate, ExperienceUpdate
from devfolio.services.crud import TableService

experience_service = TableService(
    table="experience",
    create_schema=ExperienceCreate,
    update_schema=ExperienceUpdate,
    order_by="start_date",
    owner_column="user_id",
    row_check=check_row_dates,
)
