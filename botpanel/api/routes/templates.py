"""Template preview and variable catalog endpoints."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from botpanel.api.dependencies import get_current_user_id, get_resolver
from botpanel.api.models import (
    TemplatePreviewRequest,
    TemplatePreviewResponse,
    TemplateValidateRequest,
    TemplateValidateResponse,
    VariablesContext,
    VariablesResponse,
)
from botpanel.core import PREVIEW_CLIENT_ID, Platform
from botpanel.templates import (
    TemplateResolver,
    VariableContext,
    available_variables,
    extract_variables,
    validate_variables,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/templates/preview", response_model=TemplatePreviewResponse)
def preview_template(
    request: TemplatePreviewRequest,
    user_id: str = Depends(get_current_user_id),
    resolver: TemplateResolver = Depends(get_resolver),
):
    """Resolve a message template with real or sample data."""
    context = VariableContext.from_ids(
        user_id=user_id,
        platform=request.platform,
        client_id=request.client_id or PREVIEW_CLIENT_ID,
        promotion_id=request.promotion_id,
        order_id=request.order_id,
    )
    resolved = resolver.resolve(request.template, context)
    logger.debug(f"Preview for user {user_id}: {len(extract_variables(request.template))} variables")
    return TemplatePreviewResponse(original=request.template, resolved=resolved)


@router.get("/templates/variables", response_model=VariablesResponse)
def list_variables(
    trigger_type: str | None = Query(default=None),
    has_promotion: bool = Query(default=False),
    platform: Platform | None = Query(default=None),
    user_id: str = Depends(get_current_user_id),
):
    """List the variables available for an automation trigger."""
    variables = available_variables(trigger_type or "", has_promotion)
    return VariablesResponse(
        variables=[asdict(v) for v in variables],
        context=VariablesContext(
            trigger_type=trigger_type,
            has_promotion=has_promotion,
            platform=platform,
        ),
    )


@router.post("/templates/validate", response_model=TemplateValidateResponse)
def validate_template(
    request: TemplateValidateRequest,
    user_id: str = Depends(get_current_user_id),
):
    """Check the variables used in a template against the trigger's catalog."""
    names = extract_variables(request.template)
    result = validate_variables(names, request.trigger_type, request.has_promotion)
    return TemplateValidateResponse(variables=names, valid=result.valid, invalid=result.invalid)
