"""
Auth router.

Email/password sign-up, sign-in and sign-out against Supabase Auth.
Signing in binds remote sync for the account and runs the one-time
migration followed by a full pull.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import get_tracker
from api.errors import tracker_call, unwrap
from application.tracker import WorkoutTracker


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


class SignUpRequest(BaseModel):
    email: str
    password: str
    name: Optional[str] = None
    invite_code: Optional[str] = None


class SignInRequest(BaseModel):
    email: str
    password: str


@router.post("/signup", status_code=201)
def sign_up(request: SignUpRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    """Create an account. The user confirms their email and then signs in."""
    with tracker_call(tracker):
        result = unwrap(
            tracker.sign_up(request.email, request.password, request.name, request.invite_code)
        )
        return {
            "user_id": result.user_id,
            "email": result.email,
            "confirmation_required": result.confirmation_required,
        }


@router.post("/signin")
def sign_in(request: SignInRequest, tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        session = tracker.sign_in(request.email, request.password)
        return {
            "user_id": session.user_id,
            "email": session.email,
            "sync": tracker.state.sync.as_dict(),
        }


@router.post("/signout")
def sign_out(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        tracker.sign_out()
        return {"signed_in": False}


@router.get("/session")
def get_session(tracker: WorkoutTracker = Depends(get_tracker)):
    with tracker_call(tracker):
        return {"signed_in": tracker.state.is_signed_in, "user_id": tracker.state.user_id}
