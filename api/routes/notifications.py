"""Notification routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.document_store import DocumentStore
from api.dependencies import authorize_user, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.assistant_schemas import NotificationResponse, NotificationsResponse
from services.notification_service import NotificationService

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.notifications")


@router.get("/{user_id}", response_model=NotificationsResponse)
def get_notifications(user_id: str, store: DocumentStore = Depends(get_store)):
    """Notifications written by background jobs, newest first"""
    notifications = NotificationService.get_notifications(store, user_id)
    return NotificationsResponse(
        notifications=[NotificationResponse.model_validate(n) for n in notifications]
    )


@router.put("/{user_id}/{notification_id}/read")
def mark_notification_read(
    user_id: str, notification_id: str, store: DocumentStore = Depends(get_store)
):
    NotificationService.mark_read(store, user_id, notification_id)
    return success_response("Notification marked as read")
