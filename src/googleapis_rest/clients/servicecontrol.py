"""Service Control API client (v2).

Provides admission control and telemetry reporting for services that
are integrated with Service Infrastructure.
"""

from typing import Any, Mapping, Optional, Union

from ..auth.base import CredentialsClient
from ..models import coerce
from ..models.servicecontrol import (
    CheckRequest,
    CheckResponse,
    ReportRequest,
    ReportResponse,
)
from .base import BaseApiClient


class ServiceControl(BaseApiClient):
    """Client for the Service Control API.

    :param client: Credentials used to authorize every call
    :type client: Optional[CredentialsClient]
    :param base_url: Override of ``https://servicecontrol.googleapis.com/``
    :type base_url: Optional[str]
    """

    DEFAULT_BASE_URL = "https://servicecontrol.googleapis.com/"

    def __init__(
        self,
        client: Optional[CredentialsClient] = None,
        base_url: Optional[str] = None,
    ):
        super().__init__(client, base_url)

    async def services_check(
        self,
        service_name: str,
        req: Union[CheckRequest, Mapping[str, Any]],
    ) -> CheckResponse:
        """Check whether an operation should be allowed to proceed.

        Performs authentication, authorization and policy checks for the
        operation described by ``req.attributes``.

        :param service_name: Service name as registered in Service
                             Management, e.g. ``"pubsub.googleapis.com"``
        :type service_name: str
        :param req: The check request
        :return: The admission decision
        :rtype: CheckResponse
        """
        url = self._url(f"v2/services/{service_name}:check")
        return await self._call(
            url, CheckResponse, method="POST", body=coerce(CheckRequest, req)
        )

    async def services_report(
        self,
        service_name: str,
        req: Union[ReportRequest, Mapping[str, Any]],
    ) -> ReportResponse:
        """Report operation results for auditing, logging and monitoring.

        :param service_name: Service name as registered in Service Management
        :type service_name: str
        :param req: The report request
        :return: An empty response on success
        :rtype: ReportResponse
        """
        url = self._url(f"v2/services/{service_name}:report")
        return await self._call(
            url, ReportResponse, method="POST", body=coerce(ReportRequest, req)
        )
