"""Display & Video 360 API client (v3).

Manages advertisers, their campaigns, insertion orders and line items,
inventory sources and partners.

Examples
--------
.. code-block:: python

   dv360 = DisplayVideo(GoogleAuth.from_settings())
   campaign = await dv360.advertisers_campaigns_get(1234567, 987654321098765)
"""

from typing import Any, Mapping, Optional, Union

from ..auth.base import CredentialsClient
from ..models import Empty, coerce
from ..models.displayvideo import (
    Advertiser,
    AdvertisersAuditOptions,
    AdvertisersListOptions,
    AuditAdvertiserResponse,
    Campaign,
    DuplicateLineItemRequest,
    DuplicateLineItemResponse,
    InsertionOrder,
    InventorySource,
    InventorySourceAccessOptions,
    InventorySourcesListOptions,
    InventorySourcesPatchOptions,
    LineItem,
    ListAdvertisersResponse,
    ListCampaignsResponse,
    ListInsertionOrdersResponse,
    ListInventorySourcesResponse,
    ListLineItemsResponse,
    ListOptions,
    ListPartnersResponse,
    Partner,
    PartnersListOptions,
    PatchOptions,
)
from .base import BaseApiClient, Options

Body = Union[Any, Mapping[str, Any]]


class DisplayVideo(BaseApiClient):
    """Client for the Display & Video 360 API.

    Every method performs exactly one HTTP call. Request bodies may be
    models or mappings; 64-bit IDs in path parameters may be ``int`` or
    ``str``.

    :param client: Credentials used to authorize every call
    :type client: Optional[CredentialsClient]
    :param base_url: Override of ``https://displayvideo.googleapis.com/``
    :type base_url: Optional[str]
    """

    DEFAULT_BASE_URL = "https://displayvideo.googleapis.com/"

    def __init__(
        self,
        client: Optional[CredentialsClient] = None,
        base_url: Optional[str] = None,
    ):
        super().__init__(client, base_url)

    # Advertisers

    async def advertisers_get(self, advertiser_id: Union[int, str]) -> Advertiser:
        """Get an advertiser.

        :param advertiser_id: ID of the advertiser to fetch
        :return: The advertiser
        :rtype: Advertiser
        """
        url = self._url(f"v3/advertisers/{advertiser_id}")
        return await self._call(url, Advertiser)

    async def advertisers_list(
        self, opts: Options = None
    ) -> ListAdvertisersResponse:
        """List advertisers accessible to the current user.

        :param opts: ``AdvertisersListOptions``; ``partner_id`` is required
                     by the API
        :return: One page of advertisers
        :rtype: ListAdvertisersResponse
        """
        url = self._url("v3/advertisers", self._options(AdvertisersListOptions, opts))
        return await self._call(url, ListAdvertisersResponse)

    async def advertisers_create(self, req: Body) -> Advertiser:
        """Create a new advertiser.

        :param req: The advertiser to create
        :return: The created advertiser, with its ID assigned
        :rtype: Advertiser
        """
        url = self._url("v3/advertisers")
        return await self._call(
            url, Advertiser, method="POST", body=coerce(Advertiser, req)
        )

    async def advertisers_patch(
        self,
        advertiser_id: Union[int, str],
        req: Body,
        opts: Options = None,
    ) -> Advertiser:
        """Update an existing advertiser.

        :param advertiser_id: ID of the advertiser to update
        :param req: Advertiser fields to write
        :param opts: ``PatchOptions`` naming the fields in ``update_mask``
        :return: The updated advertiser
        :rtype: Advertiser
        """
        url = self._url(
            f"v3/advertisers/{advertiser_id}", self._options(PatchOptions, opts)
        )
        return await self._call(
            url, Advertiser, method="PATCH", body=coerce(Advertiser, req)
        )

    async def advertisers_delete(self, advertiser_id: Union[int, str]) -> Empty:
        """Delete an advertiser and every entity under it."""
        url = self._url(f"v3/advertisers/{advertiser_id}")
        return await self._call(url, Empty, method="DELETE")

    async def advertisers_audit(
        self, advertiser_id: Union[int, str], opts: Options = None
    ) -> AuditAdvertiserResponse:
        """Audit an advertiser's usage of entity count limits.

        :param advertiser_id: ID of the advertiser to audit
        :param opts: ``AdvertisersAuditOptions`` with an optional ``read_mask``
        :return: Entity counts under the advertiser
        :rtype: AuditAdvertiserResponse
        """
        url = self._url(
            f"v3/advertisers/{advertiser_id}:audit",
            self._options(AdvertisersAuditOptions, opts),
        )
        return await self._call(url, AuditAdvertiserResponse)

    # Campaigns

    async def advertisers_campaigns_get(
        self, advertiser_id: Union[int, str], campaign_id: Union[int, str]
    ) -> Campaign:
        url = self._url(f"v3/advertisers/{advertiser_id}/campaigns/{campaign_id}")
        return await self._call(url, Campaign)

    async def advertisers_campaigns_list(
        self, advertiser_id: Union[int, str], opts: Options = None
    ) -> ListCampaignsResponse:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/campaigns",
            self._options(ListOptions, opts),
        )
        return await self._call(url, ListCampaignsResponse)

    async def advertisers_campaigns_create(
        self, advertiser_id: Union[int, str], req: Body
    ) -> Campaign:
        url = self._url(f"v3/advertisers/{advertiser_id}/campaigns")
        return await self._call(url, Campaign, method="POST", body=coerce(Campaign, req))

    async def advertisers_campaigns_patch(
        self,
        advertiser_id: Union[int, str],
        campaign_id: Union[int, str],
        req: Body,
        opts: Options = None,
    ) -> Campaign:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/campaigns/{campaign_id}",
            self._options(PatchOptions, opts),
        )
        return await self._call(
            url, Campaign, method="PATCH", body=coerce(Campaign, req)
        )

    async def advertisers_campaigns_delete(
        self, advertiser_id: Union[int, str], campaign_id: Union[int, str]
    ) -> Empty:
        """Permanently delete a campaign. It must be archived first."""
        url = self._url(f"v3/advertisers/{advertiser_id}/campaigns/{campaign_id}")
        return await self._call(url, Empty, method="DELETE")

    # Insertion orders

    async def advertisers_insertion_orders_get(
        self, advertiser_id: Union[int, str], insertion_order_id: Union[int, str]
    ) -> InsertionOrder:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/insertionOrders/{insertion_order_id}"
        )
        return await self._call(url, InsertionOrder)

    async def advertisers_insertion_orders_list(
        self, advertiser_id: Union[int, str], opts: Options = None
    ) -> ListInsertionOrdersResponse:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/insertionOrders",
            self._options(ListOptions, opts),
        )
        return await self._call(url, ListInsertionOrdersResponse)

    async def advertisers_insertion_orders_create(
        self, advertiser_id: Union[int, str], req: Body
    ) -> InsertionOrder:
        url = self._url(f"v3/advertisers/{advertiser_id}/insertionOrders")
        return await self._call(
            url, InsertionOrder, method="POST", body=coerce(InsertionOrder, req)
        )

    async def advertisers_insertion_orders_patch(
        self,
        advertiser_id: Union[int, str],
        insertion_order_id: Union[int, str],
        req: Body,
        opts: Options = None,
    ) -> InsertionOrder:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/insertionOrders/{insertion_order_id}",
            self._options(PatchOptions, opts),
        )
        return await self._call(
            url, InsertionOrder, method="PATCH", body=coerce(InsertionOrder, req)
        )

    async def advertisers_insertion_orders_delete(
        self, advertiser_id: Union[int, str], insertion_order_id: Union[int, str]
    ) -> Empty:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/insertionOrders/{insertion_order_id}"
        )
        return await self._call(url, Empty, method="DELETE")

    # Line items

    async def advertisers_line_items_get(
        self, advertiser_id: Union[int, str], line_item_id: Union[int, str]
    ) -> LineItem:
        url = self._url(f"v3/advertisers/{advertiser_id}/lineItems/{line_item_id}")
        return await self._call(url, LineItem)

    async def advertisers_line_items_list(
        self, advertiser_id: Union[int, str], opts: Options = None
    ) -> ListLineItemsResponse:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/lineItems",
            self._options(ListOptions, opts),
        )
        return await self._call(url, ListLineItemsResponse)

    async def advertisers_line_items_create(
        self, advertiser_id: Union[int, str], req: Body
    ) -> LineItem:
        url = self._url(f"v3/advertisers/{advertiser_id}/lineItems")
        return await self._call(url, LineItem, method="POST", body=coerce(LineItem, req))

    async def advertisers_line_items_patch(
        self,
        advertiser_id: Union[int, str],
        line_item_id: Union[int, str],
        req: Body,
        opts: Options = None,
    ) -> LineItem:
        url = self._url(
            f"v3/advertisers/{advertiser_id}/lineItems/{line_item_id}",
            self._options(PatchOptions, opts),
        )
        return await self._call(
            url, LineItem, method="PATCH", body=coerce(LineItem, req)
        )

    async def advertisers_line_items_delete(
        self, advertiser_id: Union[int, str], line_item_id: Union[int, str]
    ) -> Empty:
        url = self._url(f"v3/advertisers/{advertiser_id}/lineItems/{line_item_id}")
        return await self._call(url, Empty, method="DELETE")

    async def advertisers_line_items_duplicate(
        self,
        advertiser_id: Union[int, str],
        line_item_id: Union[int, str],
        req: Body,
    ) -> DuplicateLineItemResponse:
        """Duplicate a line item.

        :param advertiser_id: ID of the advertiser owning the line item
        :param line_item_id: ID of the line item to copy
        :param req: ``DuplicateLineItemRequest`` with the new display name
        :return: Response carrying the ID of the new line item
        :rtype: DuplicateLineItemResponse
        """
        url = self._url(
            f"v3/advertisers/{advertiser_id}/lineItems/{line_item_id}:duplicate"
        )
        return await self._call(
            url,
            DuplicateLineItemResponse,
            method="POST",
            body=coerce(DuplicateLineItemRequest, req),
        )

    # Inventory sources

    async def inventory_sources_get(
        self, inventory_source_id: Union[int, str], opts: Options = None
    ) -> InventorySource:
        """Get an inventory source.

        :param inventory_source_id: ID of the inventory source to fetch
        :param opts: ``InventorySourceAccessOptions`` naming the partner or
                     advertiser the caller acts for
        :return: The inventory source
        :rtype: InventorySource
        """
        url = self._url(
            f"v3/inventorySources/{inventory_source_id}",
            self._options(InventorySourceAccessOptions, opts),
        )
        return await self._call(url, InventorySource)

    async def inventory_sources_list(
        self, opts: Options = None
    ) -> ListInventorySourcesResponse:
        url = self._url(
            "v3/inventorySources", self._options(InventorySourcesListOptions, opts)
        )
        return await self._call(url, ListInventorySourcesResponse)

    async def inventory_sources_create(
        self, req: Body, opts: Options = None
    ) -> InventorySource:
        url = self._url(
            "v3/inventorySources", self._options(InventorySourceAccessOptions, opts)
        )
        return await self._call(
            url, InventorySource, method="POST", body=coerce(InventorySource, req)
        )

    async def inventory_sources_patch(
        self,
        inventory_source_id: Union[int, str],
        req: Body,
        opts: Options = None,
    ) -> InventorySource:
        url = self._url(
            f"v3/inventorySources/{inventory_source_id}",
            self._options(InventorySourcesPatchOptions, opts),
        )
        return await self._call(
            url, InventorySource, method="PATCH", body=coerce(InventorySource, req)
        )

    # Partners

    async def partners_get(self, partner_id: Union[int, str]) -> Partner:
        url = self._url(f"v3/partners/{partner_id}")
        return await self._call(url, Partner)

    async def partners_list(self, opts: Options = None) -> ListPartnersResponse:
        """List partners accessible to the current user."""
        url = self._url("v3/partners", self._options(PartnersListOptions, opts))
        return await self._call(url, ListPartnersResponse)
