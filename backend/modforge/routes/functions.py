from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from modforge.dependencies import GenerationGatewayDep
from modforge.models.api import (
    GenerateCodeRequest,
    ProjectScaffoldingRequest,
    ProjectScaffoldingResponse,
    ReviewCodeRequest,
    ReviewCodeResponse,
)
from modforge.models.chat import GeneratedCode
from modforge.tools.scaffold_templates import generate_project_structure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions", tags=["functions"])


@router.post("/generate-code", response_model=GeneratedCode)
async def generate_code(
    payload: GenerateCodeRequest,
    gateway: GenerationGatewayDep,
) -> GeneratedCode:
    result = await gateway.generate(
        payload.prompt,
        current_file=payload.current_file,
        project_context=payload.project_context,
    )
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to generate code. Please try again.",
        )
    return result


@router.post("/review-code", response_model=ReviewCodeResponse)
async def review_code(
    payload: ReviewCodeRequest,
    gateway: GenerationGatewayDep,
) -> ReviewCodeResponse:
    review = await gateway.review(payload.code, payload.filename, payload.file_type)
    return ReviewCodeResponse(review=review)


@router.post("/project-scaffolding", response_model=ProjectScaffoldingResponse)
async def project_scaffolding(payload: ProjectScaffoldingRequest) -> ProjectScaffoldingResponse:
    logger.info(
        "Scaffolding %s (%s, Minecraft %s)",
        payload.project_name,
        payload.platform.value,
        payload.minecraft_version,
    )
    structure = generate_project_structure(
        payload.project_name,
        payload.platform,
        payload.minecraft_version,
        payload.description,
    )
    return ProjectScaffoldingResponse(
        success=True,
        project_name=payload.project_name,
        platform=payload.platform,
        minecraft_version=payload.minecraft_version,
        files=structure.files,
        project_structure=structure.project_structure,
        next_steps=structure.next_steps,
    )
