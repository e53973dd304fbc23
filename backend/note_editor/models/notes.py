from pydantic import BaseModel, ConfigDict, Field


class NoteProjection(BaseModel):
    title: str
    content: str


class NoteLoaderData(BaseModel):
    note: NoteProjection


class FieldErrors(BaseModel):
    title: list[str] = Field(default_factory=list)
    content: list[str] = Field(default_factory=list)

    def has_any(self) -> bool:
        return bool(self.title or self.content)


class ValidationResult(BaseModel):
    """Per-request outcome of checking a note edit.

    Empty lists everywhere mean the submission is valid. Serialized with
    camelCase keys, which is what the form client reads.
    """

    model_config = ConfigDict(populate_by_name=True)

    form_errors: list[str] = Field(default_factory=list, alias="formErrors")
    field_errors: FieldErrors = Field(default_factory=FieldErrors, alias="fieldErrors")

    @property
    def has_errors(self) -> bool:
        return bool(self.form_errors) or self.field_errors.has_any()


class NoteEditErrorBody(BaseModel):
    errors: ValidationResult
