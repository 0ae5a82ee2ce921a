"""Use cases for tickets and their conversation."""

from .analyze_ticket import TicketAnalyzer, analyze_ticket
from .comments import add_comment, delete_comment, list_comments
from .create_ticket import create_ticket
from .get_ticket import can_view_ticket, get_ticket, list_tickets
from .update_ticket import update_ticket

__all__ = [
    "TicketAnalyzer",
    "add_comment",
    "analyze_ticket",
    "can_view_ticket",
    "create_ticket",
    "delete_comment",
    "get_ticket",
    "list_comments",
    "list_tickets",
    "update_ticket",
]
