from .account_views import *
from .recipe_api_views import *
from .follow_views import *
from .group_views import *
from .chat_views import *
from .notification_views import *
from .statistics_views import *
from .health_view import *
