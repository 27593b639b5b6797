"""Service layer package."""

from coursereview.services import (
    auth_service,
    catalog_service,
    subject_service,
    review_service,
    version_service,
    history_service,
)
