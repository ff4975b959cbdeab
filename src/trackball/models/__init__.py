from .support import SupportTicket, TicketMessage
from .platform import Announcement, AnnouncementBar, MaintenanceSettings
