"""
Moderation state machine shared by deposits, withdrawals, task submissions
and blog posts.

    pending --approve--> approved | published
    pending --reject---> rejected

Terminal states accept no further transition.
"""
from empire.core.errors import AlreadyProcessed
from empire.models.enums import ModerationAction, ModerationStatus


class ModerationFlow:
    def __init__(self, approved_status: ModerationStatus):
        self.approved_status = approved_status

    @property
    def states(self) -> tuple:
        return ModerationStatus.PENDING, self.approved_status, ModerationStatus.REJECTED

    def target(self, action: ModerationAction) -> ModerationStatus:
        if action == ModerationAction.APPROVE:
            return self.approved_status
        return ModerationStatus.REJECTED

    def can_transition(self, current: ModerationStatus) -> bool:
        return current == ModerationStatus.PENDING

    def transition(self, current: ModerationStatus, action: ModerationAction, label: str = "Request") -> ModerationStatus:
        if not self.can_transition(current):
            raise AlreadyProcessed(f"{label} already processed (status: {ModerationStatus(current).value})")
        return self.target(action)


APPROVAL_FLOW = ModerationFlow(ModerationStatus.APPROVED)
PUBLISHING_FLOW = ModerationFlow(ModerationStatus.PUBLISHED)
