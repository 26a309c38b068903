"""User profile routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from api.dependencies import authorize_user, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.profile_schemas import ProfileResponse, ProfileUpsertRequest
from services.profile_service import ProfileService

router = APIRouter(
    prefix="/user/profile",
    tags=["Profiles"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.profiles")


@router.post("")
def upsert_profile(
    payload: ProfileUpsertRequest,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """
    Create or update the caller's profile.

    The profile key and email come from the credential, never from the body.
    """
    profile, created = ProfileService.upsert_profile(store, principal, payload)
    data = ProfileResponse.model_validate(profile).model_dump(by_alias=True)
    message = "Profile created successfully" if created else "Profile updated successfully"
    return success_response(message, data=data)


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: str, store: DocumentStore = Depends(get_store)):
    """Get a stored user profile."""
    return ProfileResponse.model_validate(ProfileService.get_profile(store, user_id))
