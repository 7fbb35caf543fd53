"""Wire contracts for the upstream image service.

`GenerationPayload` is the body of `POST /api/images/generate`;
`TaskEnvelope` is the body returned by `GET /api/images/{taskId}`.
Both are request-scoped and never persisted.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerationParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: Literal["1K", "2K", "4K"]
    aspect_ratio: Literal["1:1", "16:9", "9:16", "4:3", "3:4"] = Field(alias="aspectRatio")


class GenerationPayload(BaseModel):
    """Upstream generation request.

    `mode` is `edit` exactly when input images are attached.
    """

    prompt: str
    mode: Literal["t2i", "edit"]
    visibility: Literal["private", "public"] = "private"
    params: GenerationParams
    images: Optional[list[str]] = None

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    def log_view(self) -> dict:
        """Wire view with image data replaced by a count summary."""
        data = self.to_wire()
        if self.images:
            data["images"] = f"[{len(self.images)} images, base64 omitted]"
        return data


class TaskResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class Task(BaseModel):
    model_config = ConfigDict(extra="ignore")

    state: str
    result: Optional[TaskResult] = None
    error: Any = None


class TaskEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    task: Task
