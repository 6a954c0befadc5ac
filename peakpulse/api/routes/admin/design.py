"""
관리자 디자인 허브 API 엔드포인트

콜라보 카테고리, 디자인 콜라보, 주문 제작(Print-on-Demand) 디자인 CRUD
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import (
    NoFieldsToUpdateException,
    NotFoundException,
    SlugAlreadyExistsException,
)
from peakpulse.schemas.design import (
    CollaborationCategoryCreateRequest,
    CollaborationCategoryResponse,
    CollaborationCategoryUpdateRequest,
    CollaborationCreateRequest,
    CollaborationResponse,
    CollaborationUpdateRequest,
    PrintDesignCreateRequest,
    PrintDesignResponse,
    PrintDesignUpdateRequest,
)
from peakpulse.services.design_service import DesignService


router = APIRouter(dependencies=[Depends(get_current_admin)])


def _raise_http(e: Exception):
    """디자인 서비스 예외를 HTTP 응답 코드로 변환합니다."""
    if isinstance(e, NotFoundException):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, SlugAlreadyExistsException):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


_DESIGN_ERRORS = (NotFoundException, SlugAlreadyExistsException, NoFieldsToUpdateException)


# 콜라보 카테고리

@router.post(
    "/design-collaboration-categories",
    response_model=CollaborationCategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_collaboration_category(
    category_data: CollaborationCategoryCreateRequest, db: Session = Depends(get_db)
):
    try:
        return DesignService.create_category(category_data.model_dump(), db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.put(
    "/design-collaboration-categories/{category_id}",
    response_model=CollaborationCategoryResponse,
)
def update_collaboration_category(
    category_id: int,
    category_data: CollaborationCategoryUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return DesignService.update_category(
            category_id, category_data.model_dump(exclude_unset=True), db
        )
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.delete(
    "/design-collaboration-categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_collaboration_category(category_id: int, db: Session = Depends(get_db)):
    """카테고리를 삭제합니다. 소속 콜라보는 카테고리 없음으로 남습니다."""
    try:
        DesignService.delete_category(category_id, db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 디자인 콜라보

@router.get("/design-collaborations", response_model=List[CollaborationResponse])
def list_collaborations(db: Session = Depends(get_db)):
    """비공개 콜라보를 포함한 전체 목록"""
    return DesignService.list_collaborations(db, published_only=False)


@router.post(
    "/design-collaborations",
    response_model=CollaborationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_collaboration(
    collaboration_data: CollaborationCreateRequest, db: Session = Depends(get_db)
):
    """
    디자인 콜라보를 생성합니다.

    Raises:
        HTTPException 404: 카테고리를 찾을 수 없는 경우
        HTTPException 409: slug가 이미 존재하는 경우
    """
    try:
        return DesignService.create_collaboration(collaboration_data.model_dump(), db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.get("/design-collaborations/{collaboration_id}", response_model=CollaborationResponse)
def get_collaboration(collaboration_id: int, db: Session = Depends(get_db)):
    try:
        return DesignService.get_collaboration(collaboration_id, db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.put("/design-collaborations/{collaboration_id}", response_model=CollaborationResponse)
def update_collaboration(
    collaboration_id: int,
    collaboration_data: CollaborationUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return DesignService.update_collaboration(
            collaboration_id, collaboration_data.model_dump(exclude_unset=True), db
        )
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.delete(
    "/design-collaborations/{collaboration_id}", status_code=status.HTTP_204_NO_CONTENT
)
def delete_collaboration(collaboration_id: int, db: Session = Depends(get_db)):
    try:
        DesignService.delete_collaboration(collaboration_id, db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 주문 제작 디자인

@router.get("/print-on-demand-designs", response_model=List[PrintDesignResponse])
def list_print_designs(db: Session = Depends(get_db)):
    return DesignService.list_print_designs(db)


@router.post(
    "/print-on-demand-designs",
    response_model=PrintDesignResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_print_design(design_data: PrintDesignCreateRequest, db: Session = Depends(get_db)):
    try:
        return DesignService.create_print_design(design_data.model_dump(), db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.get("/print-on-demand-designs/{design_id}", response_model=PrintDesignResponse)
def get_print_design(design_id: int, db: Session = Depends(get_db)):
    try:
        return DesignService.get_print_design(design_id, db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.put("/print-on-demand-designs/{design_id}", response_model=PrintDesignResponse)
def update_print_design(
    design_id: int,
    design_data: PrintDesignUpdateRequest,
    db: Session = Depends(get_db),
):
    try:
        return DesignService.update_print_design(
            design_id, design_data.model_dump(exclude_unset=True), db
        )
    except _DESIGN_ERRORS as e:
        _raise_http(e)


@router.delete("/print-on-demand-designs/{design_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_print_design(design_id: int, db: Session = Depends(get_db)):
    try:
        DesignService.delete_print_design(design_id, db)
    except _DESIGN_ERRORS as e:
        _raise_http(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
