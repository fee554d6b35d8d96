from pydantic import BaseModel, Field


class ApiConfig(BaseModel):
    base_url: str = "http://localhost:2375"
    api_version: str | None = None
    timeout: float = Field(default=2.0, gt=0)


class CompletionConfig(BaseModel):
    show_all_containers: bool = True
    show_container_ids: bool = False


class DockhandConfig(BaseModel):
    version: str = "1.0"
    api: ApiConfig = Field(default_factory=ApiConfig)
    completion: CompletionConfig = Field(default_factory=CompletionConfig)
