from dataclasses import dataclass
from datetime import datetime

from anthropic_kit.params import ListParams

from .common import ApiModel


class ModelInfo(ApiModel):
    id: str
    display_name: str
    created_at: datetime
    type: str = "model"


@dataclass
class ListModelsParams(ListParams):
    """Cursor parameters for ``GET /models``."""
