"""Pydantic models for the Display & Video 360 API (v3) wire messages.

This module covers the resources used by the :class:`DisplayVideo` client:

- Partners and advertisers
- Campaigns, insertion orders and line items
- Inventory sources
- The list responses and options bags of their endpoints

Every ID, amount in micros and count is a 64-bit integer sent as a string
on the wire, so those fields are typed :data:`Int64` or :data:`UInt64`.
Update times and inventory source time ranges are :data:`Timestamp`.
"""

from enum import Enum
from typing import List, Optional

from ..utils.transcoding import Duration, Int64, Timestamp, UInt64
from .base_models import ApiModel


class EntityStatus(str, Enum):
    """Lifecycle status of a Display & Video 360 entity."""

    ENTITY_STATUS_UNSPECIFIED = "ENTITY_STATUS_UNSPECIFIED"
    ENTITY_STATUS_ACTIVE = "ENTITY_STATUS_ACTIVE"
    ENTITY_STATUS_ARCHIVED = "ENTITY_STATUS_ARCHIVED"
    ENTITY_STATUS_DRAFT = "ENTITY_STATUS_DRAFT"
    ENTITY_STATUS_PAUSED = "ENTITY_STATUS_PAUSED"
    ENTITY_STATUS_SCHEDULED_FOR_DELETION = "ENTITY_STATUS_SCHEDULED_FOR_DELETION"


# Common Models
class Date(ApiModel):
    """A whole calendar date. Zero components mean "unspecified"."""

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


class DateRange(ApiModel):
    """An inclusive range of dates."""

    start_date: Optional[Date] = None
    end_date: Optional[Date] = None


class TimeRange(ApiModel):
    """A range of time.

    :param start_time: Lower bound of the range, inclusive
    :type start_time: Optional[datetime]
    :param end_time: Upper bound of the range, inclusive
    :type end_time: Optional[datetime]
    """

    start_time: Optional[Timestamp] = None
    end_time: Optional[Timestamp] = None


class Money(ApiModel):
    """An amount of money with its currency type.

    :param currency_code: Three-letter ISO 4217 currency code
    :type currency_code: Optional[str]
    :param units: Whole units of the amount
    :type units: Optional[int]
    :param nanos: Nano (10^-9) units of the amount
    :type nanos: Optional[int]
    """

    currency_code: Optional[str] = None
    units: Optional[Int64] = None
    nanos: Optional[int] = None


class FrequencyCap(ApiModel):
    """Settings that control how many times a user may see the same ad."""

    max_impressions: Optional[int] = None
    max_views: Optional[int] = None
    time_unit: Optional[str] = None
    time_unit_count: Optional[int] = None
    unlimited: Optional[bool] = None


class IntegrationDetails(ApiModel):
    """Integration details of an entry."""

    integration_code: Optional[str] = None
    details: Optional[str] = None


class PartnerCost(ApiModel):
    """A cost incurred in addition to the media cost.

    :param fee_amount: Fixed fee in micros of the advertiser's currency
    :type fee_amount: Optional[int]
    :param fee_percentage_millis: Percentage of media cost, in millis
    :type fee_percentage_millis: Optional[int]
    """

    cost_type: Optional[str] = None
    fee_type: Optional[str] = None
    invoice_type: Optional[str] = None
    fee_amount: Optional[Int64] = None
    fee_percentage_millis: Optional[Int64] = None


class Pacing(ApiModel):
    """How the budget is spent over the flight.

    :param daily_max_micros: Maximum daily spend in micros
    :type daily_max_micros: Optional[int]
    :param daily_max_impressions: Maximum number of impressions per day
    :type daily_max_impressions: Optional[int]
    """

    pacing_period: Optional[str] = None
    pacing_type: Optional[str] = None
    daily_max_micros: Optional[Int64] = None
    daily_max_impressions: Optional[Int64] = None


class FixedBidStrategy(ApiModel):
    """A strategy that uses a fixed bidding price."""

    bid_amount_micros: Optional[Int64] = None


class MaximizeSpendBidStrategy(ApiModel):
    """A strategy that spends the budget while optimizing a goal type."""

    performance_goal_type: Optional[str] = None
    max_average_cpm_bid_amount_micros: Optional[Int64] = None
    custom_bidding_algorithm_id: Optional[Int64] = None
    raise_bid_for_deals: Optional[bool] = None


class PerformanceGoalBidStrategy(ApiModel):
    """A strategy that meets or beats a performance goal value."""

    performance_goal_type: Optional[str] = None
    performance_goal_amount_micros: Optional[Int64] = None
    max_average_cpm_bid_amount_micros: Optional[Int64] = None
    custom_bidding_algorithm_id: Optional[Int64] = None


class BiddingStrategy(ApiModel):
    """Settings that decide the bid price. Only one strategy is set."""

    fixed_bid: Optional[FixedBidStrategy] = None
    maximize_spend_auto_bid: Optional[MaximizeSpendBidStrategy] = None
    performance_goal_auto_bid: Optional[PerformanceGoalBidStrategy] = None


class SdfConfig(ApiModel):
    """Structured Data File settings."""

    version: Optional[str] = None
    admin_email: Optional[str] = None


class AdvertiserSdfConfig(ApiModel):
    """Structured Data File settings of an advertiser."""

    override_partner_sdf_config: Optional[bool] = None
    sdf_config: Optional[SdfConfig] = None


class AdvertiserDataAccessConfig(ApiModel):
    """Settings controlling how advertiser data may be accessed."""

    sdf_config: Optional[AdvertiserSdfConfig] = None


class BillingConfig(ApiModel):
    """Billing related settings."""

    billing_profile_id: Optional[Int64] = None


# Partner Models
class PartnerGeneralConfig(ApiModel):
    """General settings of a partner."""

    time_zone: Optional[str] = None
    currency_code: Optional[str] = None


class MeasurementConfig(ApiModel):
    """Measurement settings of a partner."""

    dv360_to_cm_cost_reporting_enabled: Optional[bool] = None
    dv360_to_cm_data_sharing_enabled: Optional[bool] = None


class PartnerAdServerConfig(ApiModel):
    """Ad server settings of a partner."""

    measurement_config: Optional[MeasurementConfig] = None


class PartnerDataAccessConfig(ApiModel):
    """Settings controlling how partner data may be accessed."""

    sdf_config: Optional[SdfConfig] = None


class ExchangeConfigEnabledExchange(ApiModel):
    """An exchange enabled for the partner."""

    exchange: Optional[str] = None
    google_ad_manager_agency_id: Optional[str] = None
    google_ad_manager_buyer_network_id: Optional[str] = None
    seat_id: Optional[str] = None


class ExchangeConfig(ApiModel):
    """Settings that control which exchanges are enabled for a partner."""

    enabled_exchanges: Optional[List[ExchangeConfigEnabledExchange]] = None


class Partner(ApiModel):
    """A single partner in Display & Video 360.

    :param name: Resource name of the partner
    :type name: Optional[str]
    :param partner_id: Unique ID of the partner, assigned by the system
    :type partner_id: Optional[int]
    :param display_name: Display name of the partner
    :type display_name: Optional[str]
    :param entity_status: Entity status of the partner
    :type entity_status: Optional[EntityStatus]
    :param update_time: When the partner was last updated
    :type update_time: Optional[datetime]
    """

    name: Optional[str] = None
    partner_id: Optional[Int64] = None
    display_name: Optional[str] = None
    entity_status: Optional[EntityStatus] = None
    update_time: Optional[Timestamp] = None
    general_config: Optional[PartnerGeneralConfig] = None
    ad_server_config: Optional[PartnerAdServerConfig] = None
    data_access_config: Optional[PartnerDataAccessConfig] = None
    exchange_config: Optional[ExchangeConfig] = None
    billing_config: Optional[BillingConfig] = None


class ListPartnersResponse(ApiModel):
    """Response of ``partners.list``."""

    partners: Optional[List[Partner]] = None
    next_page_token: Optional[str] = None


class PartnersListOptions(ApiModel):
    """Query parameters for ``partners.list``."""

    filter: Optional[str] = None
    order_by: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None


# Advertiser Models
class AdvertiserGeneralConfig(ApiModel):
    """General settings of an advertiser."""

    domain_url: Optional[str] = None
    time_zone: Optional[str] = None
    currency_code: Optional[str] = None


class ThirdPartyOnlyConfig(ApiModel):
    """Settings for advertisers that use third-party ad servers only."""

    pixel_order_id_reporting_enabled: Optional[bool] = None


class CmHybridConfig(ApiModel):
    """Settings for advertisers that use both Campaign Manager 360 and
    third-party ad servers.

    :param cm_account_id: Account ID of the linked CM360 Floodlight
        configuration
    :type cm_account_id: Optional[int]
    :param cm_floodlight_config_id: ID of the linked CM360 Floodlight
        configuration
    :type cm_floodlight_config_id: Optional[int]
    :param cm_advertiser_ids: CM360 advertisers sharing the configuration
    :type cm_advertiser_ids: Optional[List[int]]
    :param cm_syncable_site_ids: CM360 sites whose placements sync to DV360
    :type cm_syncable_site_ids: Optional[List[int]]
    """

    cm_account_id: Optional[Int64] = None
    cm_floodlight_config_id: Optional[Int64] = None
    cm_advertiser_ids: Optional[List[Int64]] = None
    cm_syncable_site_ids: Optional[List[Int64]] = None
    cm_floodlight_linking_authorized: Optional[bool] = None
    dv360_to_cm_cost_reporting_enabled: Optional[bool] = None
    dv360_to_cm_data_sharing_enabled: Optional[bool] = None


class AdvertiserAdServerConfig(ApiModel):
    """Ad server settings of an advertiser. Only one config is set."""

    third_party_only_config: Optional[ThirdPartyOnlyConfig] = None
    cm_hybrid_config: Optional[CmHybridConfig] = None


class AdvertiserCreativeConfig(ApiModel):
    """Creative settings of an advertiser.

    :param ias_client_id: Integral Ad Science client ID
    :type ias_client_id: Optional[int]
    """

    dynamic_creative_enabled: Optional[bool] = None
    ias_client_id: Optional[Int64] = None
    oba_compliance_disabled: Optional[bool] = None
    video_creative_data_sharing_authorized: Optional[bool] = None


class Advertiser(ApiModel):
    """A single advertiser in Display & Video 360.

    :param name: Resource name of the advertiser
    :type name: Optional[str]
    :param advertiser_id: Unique ID of the advertiser, assigned by the system
    :type advertiser_id: Optional[int]
    :param partner_id: ID of the partner the advertiser belongs to
    :type partner_id: Optional[int]
    :param display_name: Display name of the advertiser
    :type display_name: Optional[str]
    :param entity_status: Whether ad serving is enabled for the advertiser
    :type entity_status: Optional[EntityStatus]
    :param update_time: When the advertiser was last updated
    :type update_time: Optional[datetime]
    """

    name: Optional[str] = None
    advertiser_id: Optional[Int64] = None
    partner_id: Optional[Int64] = None
    display_name: Optional[str] = None
    entity_status: Optional[EntityStatus] = None
    update_time: Optional[Timestamp] = None
    general_config: Optional[AdvertiserGeneralConfig] = None
    ad_server_config: Optional[AdvertiserAdServerConfig] = None
    creative_config: Optional[AdvertiserCreativeConfig] = None
    data_access_config: Optional[AdvertiserDataAccessConfig] = None
    integration_details: Optional[IntegrationDetails] = None
    billing_config: Optional[BillingConfig] = None
    prisma_enabled: Optional[bool] = None
    contains_eu_political_ads: Optional[str] = None


class ListAdvertisersResponse(ApiModel):
    """Response of ``advertisers.list``."""

    advertisers: Optional[List[Advertiser]] = None
    next_page_token: Optional[str] = None


class AuditAdvertiserResponse(ApiModel):
    """Usage counts of an advertiser, returned by ``advertisers.audit``.

    All counts are 64-bit and never negative.
    """

    ad_group_criteria_count: Optional[UInt64] = None
    campaign_criteria_count: Optional[UInt64] = None
    channels_count: Optional[UInt64] = None
    negative_keyword_lists_count: Optional[UInt64] = None
    negatively_targeted_channels_count: Optional[UInt64] = None
    negative_keywords_count: Optional[UInt64] = None
    used_campaigns_count: Optional[UInt64] = None
    used_insertion_orders_count: Optional[UInt64] = None
    used_line_items_count: Optional[UInt64] = None


class AdvertisersListOptions(ApiModel):
    """Query parameters for ``advertisers.list``.

    :param partner_id: Required. Partner whose advertisers are listed
    :type partner_id: Optional[int]
    """

    filter: Optional[str] = None
    order_by: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None
    partner_id: Optional[Int64] = None


class AdvertisersAuditOptions(ApiModel):
    """Query parameters for ``advertisers.audit``."""

    read_mask: Optional[str] = None


class PatchOptions(ApiModel):
    """Query parameters shared by patch endpoints.

    :param update_mask: Comma separated field mask of the fields to update
    :type update_mask: Optional[str]
    """

    update_mask: Optional[str] = None


class ListOptions(ApiModel):
    """Query parameters shared by list endpoints under an advertiser."""

    filter: Optional[str] = None
    order_by: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None


# Campaign Models
class PerformanceGoal(ApiModel):
    """Settings that control the performance goal of a campaign."""

    performance_goal_type: Optional[str] = None
    performance_goal_amount_micros: Optional[Int64] = None
    performance_goal_percentage_micros: Optional[Int64] = None
    performance_goal_string: Optional[str] = None


class CampaignGoal(ApiModel):
    """Settings that track the goal of a campaign."""

    campaign_goal_type: Optional[str] = None
    performance_goal: Optional[PerformanceGoal] = None


class CampaignFlight(ApiModel):
    """Settings that track the planned spend and duration of a campaign."""

    planned_spend_amount_micros: Optional[Int64] = None
    planned_dates: Optional[DateRange] = None


class PrismaCpeCode(ApiModel):
    """Google Payments Center client, product and estimate codes."""

    prisma_client_code: Optional[str] = None
    prisma_estimate_code: Optional[str] = None
    prisma_product_code: Optional[str] = None


class PrismaConfig(ApiModel):
    """Settings specific to the Mediaocean Prisma tool."""

    prisma_type: Optional[str] = None
    prisma_cpe_code: Optional[PrismaCpeCode] = None
    supplier: Optional[str] = None


class CampaignBudget(ApiModel):
    """Settings that control how a campaign budget is allocated.

    :param budget_id: Unique ID of the budget, assigned by the system
    :type budget_id: Optional[int]
    :param budget_amount_micros: Total amount the budget can spend
    :type budget_amount_micros: Optional[int]
    """

    budget_id: Optional[Int64] = None
    display_name: Optional[str] = None
    budget_unit: Optional[str] = None
    budget_amount_micros: Optional[Int64] = None
    date_range: Optional[DateRange] = None
    external_budget_source: Optional[str] = None
    external_budget_id: Optional[str] = None
    invoice_grouping_id: Optional[str] = None
    prisma_config: Optional[PrismaConfig] = None


class Campaign(ApiModel):
    """A single campaign.

    :param name: Resource name of the campaign
    :type name: Optional[str]
    :param advertiser_id: ID of the advertiser the campaign belongs to
    :type advertiser_id: Optional[int]
    :param campaign_id: Unique ID of the campaign, assigned by the system
    :type campaign_id: Optional[int]
    :param display_name: Display name of the campaign
    :type display_name: Optional[str]
    :param entity_status: Whether the insertion orders under the campaign
        can spend budget
    :type entity_status: Optional[EntityStatus]
    :param update_time: When the campaign was last updated
    :type update_time: Optional[datetime]
    """

    name: Optional[str] = None
    advertiser_id: Optional[Int64] = None
    campaign_id: Optional[Int64] = None
    display_name: Optional[str] = None
    entity_status: Optional[EntityStatus] = None
    update_time: Optional[Timestamp] = None
    campaign_goal: Optional[CampaignGoal] = None
    campaign_flight: Optional[CampaignFlight] = None
    frequency_cap: Optional[FrequencyCap] = None
    campaign_budgets: Optional[List[CampaignBudget]] = None


class ListCampaignsResponse(ApiModel):
    """Response of ``advertisers.campaigns.list``."""

    campaigns: Optional[List[Campaign]] = None
    next_page_token: Optional[str] = None


# Insertion Order Models
class Kpi(ApiModel):
    """Settings that control the key performance indicator of an
    insertion order."""

    kpi_type: Optional[str] = None
    kpi_amount_micros: Optional[Int64] = None
    kpi_percentage_micros: Optional[Int64] = None
    kpi_string: Optional[str] = None
    kpi_algorithm_id: Optional[Int64] = None


class InsertionOrderBudgetSegment(ApiModel):
    """Budget for a specific date range of an insertion order."""

    budget_amount_micros: Optional[Int64] = None
    description: Optional[str] = None
    date_range: Optional[DateRange] = None
    campaign_budget_id: Optional[Int64] = None


class InsertionOrderBudget(ApiModel):
    """Settings that control how an insertion order budget is allocated."""

    budget_unit: Optional[str] = None
    automation_type: Optional[str] = None
    budget_segments: Optional[List[InsertionOrderBudgetSegment]] = None


class InsertionOrder(ApiModel):
    """A single insertion order.

    :param insertion_order_id: Unique ID of the insertion order
    :type insertion_order_id: Optional[int]
    :param campaign_id: ID of the campaign the insertion order belongs to
    :type campaign_id: Optional[int]
    """

    name: Optional[str] = None
    advertiser_id: Optional[Int64] = None
    campaign_id: Optional[Int64] = None
    insertion_order_id: Optional[Int64] = None
    display_name: Optional[str] = None
    insertion_order_type: Optional[str] = None
    entity_status: Optional[EntityStatus] = None
    update_time: Optional[Timestamp] = None
    partner_costs: Optional[List[PartnerCost]] = None
    pacing: Optional[Pacing] = None
    frequency_cap: Optional[FrequencyCap] = None
    integration_details: Optional[IntegrationDetails] = None
    kpi: Optional[Kpi] = None
    budget: Optional[InsertionOrderBudget] = None
    bid_strategy: Optional[BiddingStrategy] = None
    reservation_type: Optional[str] = None
    optimization_objective: Optional[str] = None


class ListInsertionOrdersResponse(ApiModel):
    """Response of ``advertisers.insertionOrders.list``."""

    insertion_orders: Optional[List[InsertionOrder]] = None
    next_page_token: Optional[str] = None


# Line Item Models
class LineItemFlight(ApiModel):
    """Settings that control the active duration of a line item."""

    flight_date_type: Optional[str] = None
    date_range: Optional[DateRange] = None


class LineItemBudget(ApiModel):
    """Settings that control how a line item budget is allocated.

    :param max_amount: Maximum budget amount; micros of the advertiser's
        currency or a number of impressions depending on ``budget_unit``
    :type max_amount: Optional[int]
    """

    budget_allocation_type: Optional[str] = None
    budget_unit: Optional[str] = None
    max_amount: Optional[Int64] = None


class PartnerRevenueModel(ApiModel):
    """How the partner bills for a line item."""

    markup_type: Optional[str] = None
    markup_amount: Optional[Int64] = None


class TrackingFloodlightActivityConfig(ApiModel):
    """Settings that control how a Floodlight activity counts conversions."""

    floodlight_activity_id: Optional[Int64] = None
    post_click_lookback_window_days: Optional[int] = None
    post_view_lookback_window_days: Optional[int] = None


class ConversionCountingConfig(ApiModel):
    """Settings that control how conversions are counted."""

    post_view_count_percentage_millis: Optional[Int64] = None
    floodlight_activity_configs: Optional[List[TrackingFloodlightActivityConfig]] = (
        None
    )


class MobileApp(ApiModel):
    """A mobile app promoted by a mobile app install line item."""

    app_id: Optional[str] = None
    display_name: Optional[str] = None
    platform: Optional[str] = None
    publisher: Optional[str] = None


class LineItem(ApiModel):
    """A single line item.

    :param line_item_id: Unique ID of the line item, assigned by the system
    :type line_item_id: Optional[int]
    :param insertion_order_id: ID of the insertion order it belongs to
    :type insertion_order_id: Optional[int]
    :param creative_ids: IDs of the creatives associated with the line item
    :type creative_ids: Optional[List[int]]
    :param warning_messages: Warnings generated for the line item
    :type warning_messages: Optional[List[str]]
    """

    name: Optional[str] = None
    advertiser_id: Optional[Int64] = None
    campaign_id: Optional[Int64] = None
    insertion_order_id: Optional[Int64] = None
    line_item_id: Optional[Int64] = None
    display_name: Optional[str] = None
    line_item_type: Optional[str] = None
    entity_status: Optional[EntityStatus] = None
    update_time: Optional[Timestamp] = None
    partner_costs: Optional[List[PartnerCost]] = None
    flight: Optional[LineItemFlight] = None
    budget: Optional[LineItemBudget] = None
    pacing: Optional[Pacing] = None
    frequency_cap: Optional[FrequencyCap] = None
    partner_revenue_model: Optional[PartnerRevenueModel] = None
    conversion_counting: Optional[ConversionCountingConfig] = None
    creative_ids: Optional[List[Int64]] = None
    bid_strategy: Optional[BiddingStrategy] = None
    integration_details: Optional[IntegrationDetails] = None
    warning_messages: Optional[List[str]] = None
    mobile_app: Optional[MobileApp] = None
    reservation_type: Optional[str] = None
    exclude_new_exchanges: Optional[bool] = None
    contains_eu_political_ads: Optional[str] = None


class ListLineItemsResponse(ApiModel):
    """Response of ``advertisers.lineItems.list``."""

    line_items: Optional[List[LineItem]] = None
    next_page_token: Optional[str] = None


class DuplicateLineItemRequest(ApiModel):
    """Request message for ``advertisers.lineItems.duplicate``."""

    target_display_name: Optional[str] = None
    contains_eu_political_ads: Optional[str] = None


class DuplicateLineItemResponse(ApiModel):
    """Response of ``advertisers.lineItems.duplicate``."""

    duplicate_line_item_id: Optional[Int64] = None


# Inventory Source Models
class InventorySourceStatus(ApiModel):
    """Status related settings of an inventory source."""

    entity_status: Optional[EntityStatus] = None
    entity_pause_reason: Optional[str] = None
    seller_status: Optional[str] = None
    seller_pause_reason: Optional[str] = None
    config_status: Optional[str] = None


class RateDetails(ApiModel):
    """Rate settings of an inventory source.

    :param rate: The rate for the inventory source
    :type rate: Optional[Money]
    :param minimum_spend: Minimum spend, for fixed-rate sources only
    :type minimum_spend: Optional[Money]
    :param units_purchased: Impressions bought, for guaranteed CPM sources
    :type units_purchased: Optional[int]
    """

    inventory_source_rate_type: Optional[str] = None
    rate: Optional[Money] = None
    minimum_spend: Optional[Money] = None
    units_purchased: Optional[Int64] = None


class Dimensions(ApiModel):
    """Dimensions of a rectangle or other shape."""

    width_pixels: Optional[int] = None
    height_pixels: Optional[int] = None


class InventorySourceDisplayCreativeConfig(ApiModel):
    """Configuration for display creatives."""

    creative_size: Optional[Dimensions] = None


class InventorySourceVideoCreativeConfig(ApiModel):
    """Configuration for video creatives."""

    duration: Optional[Duration] = None


class CreativeConfig(ApiModel):
    """Creative requirements configuration of an inventory source."""

    creative_type: Optional[str] = None
    display_creative_config: Optional[InventorySourceDisplayCreativeConfig] = None
    video_creative_config: Optional[InventorySourceVideoCreativeConfig] = None


class InventorySourceAccessorsPartnerAccessor(ApiModel):
    """The partner with access to an inventory source."""

    partner_id: Optional[Int64] = None


class InventorySourceAccessorsAdvertiserAccessors(ApiModel):
    """The advertisers with access to an inventory source."""

    advertiser_ids: Optional[List[Int64]] = None


class InventorySourceAccessors(ApiModel):
    """The partner or advertisers with access to an inventory source."""

    partner: Optional[InventorySourceAccessorsPartnerAccessor] = None
    advertisers: Optional[InventorySourceAccessorsAdvertiserAccessors] = None


class InventorySource(ApiModel):
    """An inventory source.

    :param inventory_source_id: Unique ID of the inventory source
    :type inventory_source_id: Optional[int]
    :param rate_details: Rate details of the inventory source
    :type rate_details: Optional[RateDetails]
    :param time_range: Time range when the inventory source starts and
        stops serving
    :type time_range: Optional[TimeRange]
    :param read_advertiser_ids: Advertisers with read-only access
    :type read_advertiser_ids: Optional[List[int]]
    :param read_partner_ids: Partners with read-only access
    :type read_partner_ids: Optional[List[int]]
    """

    name: Optional[str] = None
    inventory_source_id: Optional[Int64] = None
    display_name: Optional[str] = None
    inventory_source_type: Optional[str] = None
    inventory_source_product_type: Optional[str] = None
    commitment: Optional[str] = None
    delivery_method: Optional[str] = None
    deal_id: Optional[str] = None
    status: Optional[InventorySourceStatus] = None
    exchange: Optional[str] = None
    update_time: Optional[Timestamp] = None
    rate_details: Optional[RateDetails] = None
    publisher_name: Optional[str] = None
    time_range: Optional[TimeRange] = None
    creative_configs: Optional[List[CreativeConfig]] = None
    guaranteed_order_id: Optional[str] = None
    read_write_accessors: Optional[InventorySourceAccessors] = None
    read_advertiser_ids: Optional[List[Int64]] = None
    read_partner_ids: Optional[List[Int64]] = None


class ListInventorySourcesResponse(ApiModel):
    """Response of ``inventorySources.list``."""

    inventory_sources: Optional[List[InventorySource]] = None
    next_page_token: Optional[str] = None


class InventorySourceAccessOptions(ApiModel):
    """Query parameters naming the DV360 entity an inventory source call is
    made on behalf of. Set exactly one of the two."""

    advertiser_id: Optional[Int64] = None
    partner_id: Optional[Int64] = None


class InventorySourcesListOptions(InventorySourceAccessOptions):
    """Query parameters for ``inventorySources.list``."""

    filter: Optional[str] = None
    order_by: Optional[str] = None
    page_size: Optional[int] = None
    page_token: Optional[str] = None


class InventorySourcesPatchOptions(InventorySourceAccessOptions):
    """Query parameters for ``inventorySources.patch``."""

    update_mask: Optional[str] = None
