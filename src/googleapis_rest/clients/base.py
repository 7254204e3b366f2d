"""Shared plumbing for the per-API endpoint clients."""

from typing import Any, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import urlencode

from ..auth.base import CredentialsClient
from ..models import ApiModel, coerce
from ..utils.http import request
from ..utils.transcoding import to_query_params

M = TypeVar("M", bound=ApiModel)

Options = Union[ApiModel, Mapping[str, Any], None]


class BaseApiClient:
    """Base class for a client of one Google REST API.

    Holds the credentials and base URL shared by every endpoint method.
    Both are fixed at construction.

    :param client: Credentials used to authorize every call, or None for
                   unauthenticated calls
    :type client: Optional[CredentialsClient]
    :param base_url: Override of the API root URL
    :type base_url: Optional[str]
    """

    DEFAULT_BASE_URL = ""

    def __init__(
        self,
        client: Optional[CredentialsClient] = None,
        base_url: Optional[str] = None,
    ):
        url = base_url or self.DEFAULT_BASE_URL
        if not url.endswith("/"):
            url += "/"
        self._client = client
        self._base_url = url

    @property
    def credentials(self) -> Optional[CredentialsClient]:
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str, opts: Options = None) -> str:
        """Resolve an endpoint path and its query parameters.

        :param path: Path relative to the base URL, IDs already interpolated
        :type path: str
        :param opts: Options model or mapping carrying query parameters
        :return: Absolute URL, with a query string only when a parameter is set
        :rtype: str
        """
        url = self._base_url + path
        params = to_query_params(opts)
        if params:
            url += "?" + urlencode(params)
        return url

    @staticmethod
    def _options(model_cls: Type[M], opts: Options) -> Optional[M]:
        if opts is None:
            return None
        return coerce(model_cls, opts)

    async def _call(
        self,
        url: str,
        response_cls: Type[M],
        method: str = "GET",
        body: Optional[ApiModel] = None,
    ) -> M:
        data = await request(
            url,
            client=self._client,
            method=method,
            body=body.to_json() if body is not None else None,
        )
        return response_cls.from_wire(data)
