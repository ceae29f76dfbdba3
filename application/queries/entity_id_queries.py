"""Parsing of untrusted identifier text into EntityId results."""

import structlog
from returns.result import Failure, Result, Success

from application.errors import AppError
from application.mappers.error_mappers import AppErrorMapper
from domain.exceptions import ValidationError
from domain.value_objects.entity_id import EntityId

logger = structlog.get_logger()


class ParseEntityIdQuery:
    """Parse untrusted identifier text into an EntityId."""

    def __init__(self, field_name: str = "id") -> None:
        self.field_name = field_name

    def execute(self, raw: str) -> Result[EntityId, AppError]:
        """Return the parsed id, or a 400 validation AppError tagged with the field name."""
        try:
            return Success(EntityId.from_string(raw))
        except ValidationError as e:
            app_error = AppErrorMapper.from_domain_error(e).with_field(self.field_name)
            logger.info(
                "entity_id_rejected",
                field=self.field_name,
                reason=str(e),
            )
            return Failure(app_error)
