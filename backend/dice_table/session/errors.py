"""Rejections the coordinator reports back to the offending connection.

None of these are fatal. They never reach other connections and the
client is expected to correct itself and resend.
"""


class SessionError(Exception):
    kind = 'SessionError'
    default_message = 'Request rejected'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRole(SessionError):
    kind = 'InvalidRole'
    default_message = 'Invalid role'


class RoleTaken(SessionError):
    kind = 'RoleTaken'
    default_message = 'That role has already been taken'


class AlreadyClaimed(SessionError):
    kind = 'AlreadyClaimed'
    default_message = 'You have already chosen a role and cannot switch'


class NotOwner(SessionError):
    kind = 'NotOwner'
    default_message = 'You do not own that role or it is not online'
