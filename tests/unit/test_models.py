"""Unit tests for the wire message models.

Covers the transcoding contract every message follows: 64-bit integers
and timestamps are converted in both directions, nested messages are
transcoded recursively, unknown fields pass through and absent fields
stay absent.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from googleapis_rest.models import Empty, coerce, deserialize, serialize
from googleapis_rest.models.displayvideo import (
    Advertiser,
    AuditAdvertiserResponse,
    Campaign,
    EntityStatus,
    InventorySource,
    LineItem,
    ListCampaignsResponse,
)
from googleapis_rest.models.servicecontrol import (
    AttributeContext,
    CheckRequest,
    CheckResponse,
    Peer,
    ReportRequest,
    Request,
    Response,
    V2LogEntry,
)

UTC = timezone.utc


class TestSerialize:
    def test_absent_id_not_synthesized(self):
        wire = serialize(Advertiser(advertiser_id=None, partner_id=123456789012345))
        assert wire == {"partnerId": "123456789012345"}

    def test_none_passes_through(self):
        assert serialize(None) is None
        assert deserialize(Campaign, None) is None

    def test_mapping_validated_against_model(self):
        wire = serialize({"partner_id": 42, "displayName": "Acme"}, Advertiser)
        assert wire == {"partnerId": "42", "displayName": "Acme"}

    def test_plain_mapping_copied(self):
        original = {"anything": 1}
        wire = serialize(original)
        assert wire == original
        assert wire is not original

    def test_to_json_is_wire_form(self):
        advertiser = Advertiser(
            partner_id=7,
            entity_status=EntityStatus.ENTITY_STATUS_ACTIVE,
            update_time=datetime(2023, 5, 1, 12, tzinfo=UTC),
        )
        assert json.loads(advertiser.to_json()) == {
            "partnerId": "7",
            "entityStatus": "ENTITY_STATUS_ACTIVE",
            "updateTime": "2023-05-01T12:00:00.000Z",
        }

    def test_empty_message(self):
        assert Empty().to_wire() == {}
        assert Empty.from_wire({}).to_wire() == {}


class TestDeserialize:
    def test_campaign_id_and_update_time(self):
        campaign = Campaign.from_wire(
            {"campaignId": "987654321098765", "updateTime": "2023-05-01T12:00:00Z"}
        )
        assert campaign.campaign_id == 987654321098765
        assert campaign.update_time == datetime(2023, 5, 1, 12, tzinfo=UTC)
        assert campaign.advertiser_id is None

    def test_absent_fields_stay_absent(self):
        campaign = Campaign.from_wire({"displayName": "Spring"})
        assert campaign.model_fields_set == {"display_name"}
        assert campaign.to_wire() == {"displayName": "Spring"}

    def test_max_int64_survives_round_trip(self):
        wire = Campaign(campaign_id=9223372036854775807).to_wire()
        assert wire == {"campaignId": "9223372036854775807"}
        assert Campaign.from_wire(wire).campaign_id == 9223372036854775807

    def test_malformed_id_propagates(self):
        with pytest.raises(ValidationError):
            Campaign.from_wire({"campaignId": "abc"})

    def test_unknown_fields_pass_through(self):
        wire = {
            "campaignId": "1",
            "brandNewField": {"nested": ["a", 1]},
            "anotherOne": "x",
        }
        assert Campaign.from_wire(wire).to_wire() == wire

    def test_null_extras_pass_through(self):
        wire = {"advertiserId": "1", "newApiField": None}
        advertiser = Advertiser.from_wire(wire)
        assert advertiser.to_wire() == wire
        assert json.loads(advertiser.to_json()) == wire

    def test_null_extras_kept_in_nested_messages(self):
        wire = {
            "campaignId": "1",
            "campaignBudgets": [{"budgetId": "2", "newBudgetField": None}],
        }
        campaign = Campaign.from_wire(wire)
        assert campaign.to_wire() == wire
        campaign.display_name = None
        assert "displayName" not in campaign.to_wire()


    def test_nested_lists_transcoded(self):
        response = ListCampaignsResponse.from_wire(
            {
                "campaigns": [
                    {
                        "campaignId": "11",
                        "campaignBudgets": [
                            {"budgetId": "21", "budgetAmountMicros": "5000000", "displayName": "Q1"}
                        ],
                    },
                    {"campaignId": "12"},
                ],
                "nextPageToken": "abc",
            }
        )
        first, second = response.campaigns
        assert first.campaign_budgets[0].budget_id == 21
        assert first.campaign_budgets[0].budget_amount_micros == 5_000_000
        assert first.campaign_budgets[0].display_name == "Q1"
        assert second.campaign_budgets is None
        assert response.next_page_token == "abc"

    def test_line_item_nested_and_repeated_ids(self):
        item = LineItem.from_wire(
            {
                "lineItemId": "3",
                "creativeIds": ["100", "200"],
                "partnerCosts": [{"costType": "PARTNER_COST_TYPE_ADSERVING", "feeAmount": "250000"}],
                "budget": {"maxAmount": "1000000000", "budgetUnit": "BUDGET_UNIT_CURRENCY"},
                "pacing": {"dailyMaxMicros": "2500000"},
            }
        )
        assert item.creative_ids == [100, 200]
        assert item.partner_costs[0].fee_amount == 250000
        assert item.partner_costs[0].cost_type == "PARTNER_COST_TYPE_ADSERVING"
        assert item.budget.max_amount == 1_000_000_000
        assert item.pacing.daily_max_micros == 2_500_000
        assert item.to_wire()["creativeIds"] == ["100", "200"]

    def test_audit_counts_unsigned(self):
        audit = AuditAdvertiserResponse.from_wire({"usedLineItemsCount": "9"})
        assert audit.used_line_items_count == 9
        with pytest.raises(ValidationError):
            AuditAdvertiserResponse.from_wire({"usedLineItemsCount": "-9"})

    def test_inventory_source_time_range(self):
        source = InventorySource.from_wire(
            {
                "inventorySourceId": "55",
                "timeRange": {
                    "startTime": "2024-01-01T00:00:00Z",
                    "endTime": "2024-12-31T23:59:59.500Z",
                },
            }
        )
        assert source.inventory_source_id == 55
        assert source.time_range.start_time == datetime(2024, 1, 1, tzinfo=UTC)
        assert source.time_range.end_time.microsecond == 500000


class TestCoerce:
    def test_model_returned_as_is(self):
        campaign = Campaign(campaign_id=1)
        assert coerce(Campaign, campaign) is campaign

    def test_mapping_with_either_name(self):
        campaign = coerce(Campaign, {"campaignId": "5", "display_name": "x"})
        assert campaign.campaign_id == 5
        assert campaign.display_name == "x"

    def test_snake_case_extras_sent_by_wire_name(self):
        campaign = coerce(Campaign, {"campaign_id": 5, "some_new_field": 1})
        assert campaign.to_wire() == {"campaignId": "5", "someNewField": 1}

    def test_camel_case_extras_unchanged(self):
        campaign = coerce(Campaign, {"campaignId": "5", "someNewField": 1})
        assert campaign.to_wire() == {"campaignId": "5", "someNewField": 1}



class TestServiceControlMessages:
    def test_attribute_context_round_trip(self):
        wire = {
            "origin": {"ip": "10.0.0.1", "port": "443"},
            "request": {
                "method": "GET",
                "size": "1024",
                "time": "2023-05-01T12:00:00.250Z",
            },
            "response": {
                "code": "200",
                "size": "2048",
                "backendLatency": "0.125s",
            },
        }
        context = AttributeContext.from_wire(wire)
        assert context.origin.port == 443
        assert context.request.size == 1024
        assert context.request.time == datetime(2023, 5, 1, 12, 0, 0, 250000, tzinfo=UTC)
        assert context.response.code == 200
        assert context.response.backend_latency == timedelta(milliseconds=125)
        assert context.to_wire() == wire

    def test_absent_fields_stay_absent(self):
        assert Peer.from_wire({"ip": "1.2.3.4"}).to_wire() == {"ip": "1.2.3.4"}
        assert Request().to_wire() == {}
        assert Response(code=404).to_wire() == {"code": "404"}

    def test_check_request_serialized(self):
        request = CheckRequest(
            service_config_id="2023-05-01r0",
            attributes=AttributeContext(
                request=Request(size=10, time=datetime(2023, 5, 1, tzinfo=UTC))
            ),
        )
        assert request.to_wire() == {
            "serviceConfigId": "2023-05-01r0",
            "attributes": {
                "request": {"size": "10", "time": "2023-05-01T00:00:00.000Z"}
            },
        }

    def test_check_response_status(self):
        response = CheckResponse.from_wire(
            {"status": {"code": 7, "message": "denied"}, "headers": {"a": "b"}}
        )
        assert response.status.code == 7
        assert response.status.message == "denied"
        assert response.headers == {"a": "b"}

    def test_report_request_operations(self):
        request = ReportRequest.from_wire(
            {"operations": [{"response": {"size": "5"}}, {"api": {"service": "x"}}]}
        )
        assert request.operations[0].response.size == 5
        assert request.operations[1].api.service == "x"

    def test_log_entry_timestamp_and_extras(self):
        entry = V2LogEntry.from_wire(
            {
                "timestamp": "2023-05-01T12:00:00.123456789Z",
                "severity": "ERROR",
                "httpRequest": {"requestSize": "12", "latency": "1s"},
                "sourceLocation": {"line": "42", "file": "main.py"},
                "futureField": True,
            }
        )
        assert entry.timestamp.microsecond == 123456
        assert entry.http_request.request_size == 12
        assert entry.http_request.latency == timedelta(seconds=1)
        assert entry.source_location.line == 42
        assert entry.to_wire()["futureField"] is True
