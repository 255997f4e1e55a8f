from rest_framework.decorators import api_view
from rest_framework.response import Response

from community.errors import ok
from community.services import StatisticsService
from community.views.view_utils import get_user_or_error

statistics_service = StatisticsService()


@api_view(["GET"])
def user_statistics(request, user_id):
    """Full statistics snapshot for a user wrapped as ``{success, data}``."""
    user = get_user_or_error(user_id)
    return Response(ok(statistics_service.user_statistics(user)))


@api_view(["GET"])
def likes_progression(request, user_id):
    user = get_user_or_error(user_id)
    return Response(ok(statistics_service.user_statistics(user)["likesProgression"]))


@api_view(["GET"])
def categories_distribution(request, user_id):
    user = get_user_or_error(user_id)
    return Response(ok(statistics_service.user_statistics(user)["categoriesDistribution"]))
