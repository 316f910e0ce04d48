from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class UploadUrlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(default="", alias="fileName")
    file_extension: str = Field(default="", alias="fileExtension")
    file_size: StrictInt | StrictFloat | None = Field(default=None, alias="fileSize")


class NotifyUploadRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(default="", alias="fileName")
    template: str = ""
