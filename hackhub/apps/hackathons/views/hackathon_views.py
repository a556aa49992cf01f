from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from hackhub.apps.hackathons import api, auth_roles


@require_http_methods(["GET"])
def hackathon_detail(request, hackathon_id):
    hackathon = auth_roles.get_hackathon(hackathon_id)
    auth_roles.require_hackathon_visible(request, hackathon)
    data = api.hackathon_data(hackathon, hackathon.computed_status())
    data["isOrganizer"] = auth_roles.is_organizer(request.user, hackathon)
    return JsonResponse(data)
