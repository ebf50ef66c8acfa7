# src/anthropic_kit/resources/models.py

from anthropic_kit.decoding import decode_json
from anthropic_kit.types.common import Page
from anthropic_kit.types.models import ListModelsParams, ModelInfo

from .base import ResourceMixin, api_path, require_id


class ModelsMixin(ResourceMixin):
    """Models API: ``GET /models``, newest first."""

    async def list_models(
        self, params: ListModelsParams | None = None
    ) -> Page[ModelInfo]:
        params = params or ListModelsParams()
        params.consume()
        response = await self._transport.send(
            "GET", "/models", operation="list_models", params=params.to_query()
        )
        return decode_json(response.content, Page[ModelInfo])

    async def get_model(self, model_id: str) -> ModelInfo:
        """Resolve a model id or alias to its model."""
        require_id(model_id, "model_id")
        response = await self._transport.send(
            "GET", api_path("models", model_id), operation="get_model"
        )
        return decode_json(response.content, ModelInfo)
