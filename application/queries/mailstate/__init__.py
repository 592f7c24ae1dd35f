"""Mail state queries package"""

from application.queries.mailstate.get_mail_state import GetMailStateQuery

__all__ = ["GetMailStateQuery"]
