"""
Admin endpoints for the membership e-mail jobs.

Endpoints:
    POST /api/v1/admin/memberships/premium-offers/send/
        Run the premium offer campaign now and return its result
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from memberships.services import PremiumOfferCampaign

logger = logging.getLogger(__name__)


class PremiumOfferTriggerView(APIView):
    """
    Manually trigger the premium offer campaign.

    Runs synchronously so the operator sees how many offers were queued.
    Staff only.

    Response:
        200: {"sent": int, "failed": int, "error": str | null}
        503: Same body, when the candidate query failed
    """

    permission_classes = [IsAdminUser]

    def post(self, request):
        logger.info(
            "Premium offer campaign triggered manually",
            extra={"user_id": str(request.user.pk)},
        )
        result = PremiumOfferCampaign().run()

        response_status = (
            status.HTTP_503_SERVICE_UNAVAILABLE if result.error else status.HTTP_200_OK
        )
        return Response(result.to_dict(), status=response_status)
