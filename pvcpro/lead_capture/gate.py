"""Lead-capture modal state, persisted per browser in a cookie.

Flow: not_shown → shown → submitted | skipped | dismissed.

Policies:
    once:  never shown again after the first showing, whatever the outcome.
    rearm: never shown again after a submission; otherwise shown again once
           ``rearm_after`` has passed since it was last shown.
"""

from __future__ import annotations

import base64
import binascii
from datetime import timedelta
from enum import Enum
from typing import Optional

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger()

COOKIE_NAME = "pvc_lead_capture"
COOKIE_MAX_AGE = 365 * 86400


class LeadCaptureStep(str, Enum):
    NOT_SHOWN = "not_shown"
    SHOWN = "shown"
    SUBMITTED = "submitted"
    SKIPPED = "skipped"
    DISMISSED = "dismissed"


class LeadCapturePolicy(str, Enum):
    ONCE = "once"
    REARM = "rearm"


class LeadCaptureState(BaseModel):
    step: LeadCaptureStep = LeadCaptureStep.NOT_SHOWN
    last_shown: Optional[float] = None  # epoch seconds


class LeadCaptureGate:
    """Decides whether to show the modal and records visitor outcomes."""

    def __init__(
        self,
        policy: LeadCapturePolicy = LeadCapturePolicy.REARM,
        rearm_after: timedelta = timedelta(hours=24),
    ):
        self.policy = policy
        self.rearm_after = rearm_after

    def load(self, cookie: Optional[str]) -> LeadCaptureState:
        """Parse the cookie; a missing or garbled cookie means not shown yet."""
        if not cookie:
            return LeadCaptureState()
        try:
            raw = base64.urlsafe_b64decode(cookie.encode("ascii"))
            return LeadCaptureState.model_validate_json(raw)
        except (binascii.Error, UnicodeEncodeError, ValidationError):
            logger.debug("lead_capture_cookie_invalid")
            return LeadCaptureState()

    def dump(self, state: LeadCaptureState) -> str:
        return base64.urlsafe_b64encode(state.model_dump_json().encode("utf-8")).decode("ascii")

    def should_show(self, state: LeadCaptureState, now: float) -> bool:
        if state.step == LeadCaptureStep.NOT_SHOWN:
            return True
        if state.step == LeadCaptureStep.SUBMITTED:
            return False
        if self.policy == LeadCapturePolicy.ONCE:
            return False
        if state.last_shown is None:
            return True
        return now - state.last_shown >= self.rearm_after.total_seconds()

    def mark_shown(self, state: LeadCaptureState, now: float) -> LeadCaptureState:
        return LeadCaptureState(step=LeadCaptureStep.SHOWN, last_shown=now)

    def submit(self, state: LeadCaptureState, now: float) -> LeadCaptureState:
        return LeadCaptureState(step=LeadCaptureStep.SUBMITTED, last_shown=state.last_shown or now)

    def skip(self, state: LeadCaptureState, now: float) -> LeadCaptureState:
        return LeadCaptureState(step=LeadCaptureStep.SKIPPED, last_shown=now)

    def dismiss(self, state: LeadCaptureState, now: float) -> LeadCaptureState:
        return LeadCaptureState(step=LeadCaptureStep.DISMISSED, last_shown=now)
