"""
Error taxonomy for group and expense operations.

Services raise these; the function boundary and the HTTP layer turn them into
an ``{"error": <code>}`` payload. None of them is fatal to the process.
"""


class LedgerError(Exception):
    code = "LedgerError"
    status_code = 400
    message = "ledger error"

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class GroupNotFound(LedgerError):
    code = "GroupNotFound"
    status_code = 404
    message = "group not found"


class GroupAlreadyExists(LedgerError):
    code = "GroupAlreadyExists"
    status_code = 409
    message = "group already exists"


class GroupNameEmpty(LedgerError):
    code = "GroupNameEmpty"
    status_code = 422
    message = "group name empty"


class MembersEmpty(LedgerError):
    code = "MembersEmpty"
    status_code = 422
    message = "members empty"


class MemberNotInGroup(LedgerError):
    code = "MemberNotInGroup"
    status_code = 422
    message = "one or more members not in group"


class InvalidShareFormat(LedgerError):
    code = "InvalidShareFormat"
    status_code = 422
    message = "invalid shares format"


class ShareCountMismatch(LedgerError):
    code = "ShareCountMismatch"
    status_code = 422
    message = "shares count mismatch members count"


class ExpenseNotFound(LedgerError):
    code = "ExpenseNotFound"
    status_code = 404
    message = "expense not found"
