"""
관리자 사용자 관리 API 엔드포인트
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from peakpulse.api.deps import get_db, get_current_admin
from peakpulse.core.exceptions import UserNotFoundException, ValidationException
from peakpulse.schemas.auth import UserResponse, UserRolesUpdateRequest
from peakpulse.services.user_admin_service import UserAdminService


router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return UserAdminService.list_users(db)


@router.put("/users/{user_id}/roles", response_model=UserResponse)
def update_user_roles(
    user_id: int,
    roles_data: UserRolesUpdateRequest,
    db: Session = Depends(get_db),
):
    """
    사용자 역할을 변경합니다.

    Example:
        Request:
        ```json
        {"roles": ["customer", "vip"]}
        ```

    Raises:
        HTTPException 400: 알 수 없는 역할이 포함된 경우
        HTTPException 404: 사용자를 찾을 수 없는 경우
    """
    try:
        return UserAdminService.update_roles(user_id, roles_data.roles, db)

    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UserNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
