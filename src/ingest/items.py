"""Loading of user-submitted content items from JSON or YAML files."""

import json
from pathlib import Path
from typing import Annotated

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.ingest.constants import (
    COMPONENT_INGEST,
    MAX_CONTENT_CHARS,
    MAX_ITEMS_PER_BATCH,
    MAX_SOURCE_CHARS,
    MAX_TITLE_CHARS,
    MAX_URL_CHARS,
)
from src.ingest.errors import ItemsFileError, ItemsValidationError
from src.relevance.models import ContentItem


logger = structlog.get_logger()


class SubmittedItem(BaseModel):
    """A user-submitted item as accepted at the API boundary.

    Attributes:
        source: Name of the source.
        content: Body text.
        title: Optional headline.
        url: Optional link.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    source: Annotated[str, Field(max_length=MAX_SOURCE_CHARS)]
    content: Annotated[str, Field(max_length=MAX_CONTENT_CHARS)]
    title: Annotated[str | None, Field(max_length=MAX_TITLE_CHARS)] = None
    url: Annotated[str | None, Field(max_length=MAX_URL_CHARS)] = None

    def to_content_item(self) -> ContentItem:
        """Convert to the ranker's input model."""
        return ContentItem(
            title=self.title,
            content=self.content,
            source=self.source,
            url=self.url,
        )


SubmittedBatch = Annotated[
    list[SubmittedItem], Field(max_length=MAX_ITEMS_PER_BATCH)
]

_batch_adapter: TypeAdapter[list[SubmittedItem]] = TypeAdapter(SubmittedBatch)


def validate_items(raw: object, origin: str = "<memory>") -> list[ContentItem]:
    """Validate a decoded list of submitted items.

    Args:
        raw: Decoded JSON/YAML payload; a list, or a mapping with an
            "items" list.
        origin: Where the payload came from, for error messages.

    Returns:
        ContentItems in input order.

    Raises:
        ItemsValidationError: If the payload breaks the batch limits.
    """
    if isinstance(raw, dict) and "items" in raw:
        raw = raw["items"]
    if raw is None:
        raw = []

    try:
        batch = _batch_adapter.validate_python(raw)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ItemsValidationError(errors, origin) from e

    return [item.to_content_item() for item in batch]


def load_items(path: Path) -> list[ContentItem]:
    """Load submitted items from a JSON or YAML file.

    Files ending in .json are decoded as JSON; anything else as YAML.

    Args:
        path: Path to the items file.

    Returns:
        ContentItems in file order.

    Raises:
        ItemsFileError: If the file cannot be read or decoded.
        ItemsValidationError: If the items break the batch limits.
    """
    log = logger.bind(component=COMPONENT_INGEST, path=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ItemsFileError(str(path), e.strerror or str(e)) from e

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ItemsFileError(str(path), str(e)) from e

    items = validate_items(raw, str(path))
    log.info("items_loaded", item_count=len(items))
    return items
