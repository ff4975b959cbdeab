from .user import User
from .fine import Fine
from .appeal import AccountAppeal
from .notification import Notification
