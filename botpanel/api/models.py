"""Pydantic models for API request/response validation."""

from pydantic import BaseModel, Field

from botpanel.core import Platform

# =============================================================================
# TEMPLATE PREVIEW
# =============================================================================


class TemplatePreviewRequest(BaseModel):
    """Resolve a template for preview.

    Without client_id the synthetic preview client is used.
    """

    template: str = Field(min_length=1)
    platform: Platform
    client_id: str | None = None
    promotion_id: str | None = None
    order_id: str | None = None


class TemplatePreviewResponse(BaseModel):
    success: bool = True
    original: str
    resolved: str
    message: str = "Template resolved successfully"


# =============================================================================
# VARIABLE CATALOG
# =============================================================================


class VariableInfoModel(BaseModel):
    name: str
    type: str
    description: str
    example: str


class VariablesContext(BaseModel):
    trigger_type: str | None = None
    has_promotion: bool = False
    platform: Platform | None = None


class VariablesResponse(BaseModel):
    success: bool = True
    variables: list[VariableInfoModel]
    context: VariablesContext


class TemplateValidateRequest(BaseModel):
    template: str
    trigger_type: str = ""
    has_promotion: bool = False


class TemplateValidateResponse(BaseModel):
    variables: list[str]
    valid: list[str]
    invalid: list[str]
