"""Pydantic models for the Service Control API (v2) wire messages.

Service Control provides admission control and telemetry reporting for
services integrated with Service Infrastructure. The messages here follow
the ``google.rpc.context.AttributeContext`` vocabulary.

Transcoded fields:

- 64-bit integers: ``AuditLog.num_response_items``, ``Peer.port``,
  ``Request.size``, ``Response.code``, ``Response.size``,
  ``V2HttpRequest`` byte counts and ``V2LogEntrySourceLocation.line``
- Timestamps: ``Request.time``, ``Response.time``, ``Resource`` create,
  delete and update times, ``V2LogEntry.timestamp``
- Durations: ``Response.backend_latency``, ``V2HttpRequest.latency``
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from ..utils.transcoding import Duration, Int64, Timestamp, UInt64
from .base_models import ApiModel


class LogSeverity(str, Enum):
    """Severity of a ``V2LogEntry``."""

    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"


class PolicyType(str, Enum):
    """Kind of organization policy constraint that was violated."""

    POLICY_TYPE_UNSPECIFIED = "POLICY_TYPE_UNSPECIFIED"
    BOOLEAN_CONSTRAINT = "BOOLEAN_CONSTRAINT"
    LIST_CONSTRAINT = "LIST_CONSTRAINT"
    CUSTOM_CONSTRAINT = "CUSTOM_CONSTRAINT"


class Api(ApiModel):
    """Attributes of an API operation, such as a network API request.

    :param operation: Fully qualified method name or OpenAPI operationId
    :type operation: Optional[str]
    :param protocol: Protocol used, such as "http", "https" or "grpc"
    :type protocol: Optional[str]
    :param service: Logical API service name, e.g. "pubsub.googleapis.com"
    :type service: Optional[str]
    :param version: API version, such as "v1"
    :type version: Optional[str]
    """

    operation: Optional[str] = None
    protocol: Optional[str] = None
    service: Optional[str] = None
    version: Optional[str] = None


class Auth(ApiModel):
    """Authentication attributes of a request, taken from its credentials."""

    access_levels: Optional[List[str]] = None
    audiences: Optional[List[str]] = None
    claims: Optional[Dict[str, Any]] = None
    presenter: Optional[str] = None
    principal: Optional[str] = None


class Peer(ApiModel):
    """A network peer, such as the source or destination of a request.

    :param ip: IP address of the peer
    :type ip: Optional[str]
    :param labels: Labels associated with the peer
    :type labels: Optional[Dict[str, str]]
    :param port: Network port of the peer
    :type port: Optional[int]
    :param principal: Identity of this peer
    :type principal: Optional[str]
    :param region_code: CLDR country/region code of the peer
    :type region_code: Optional[str]
    """

    ip: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    port: Optional[UInt64] = None
    principal: Optional[str] = None
    region_code: Optional[str] = None


class Request(ApiModel):
    """An HTTP request, or the equivalent for other protocols.

    :param size: Request size in bytes
    :type size: Optional[int]
    :param time: Time when the destination service received the last byte
    :type time: Optional[datetime]
    """

    auth: Optional[Auth] = None
    headers: Optional[Dict[str, str]] = None
    host: Optional[str] = None
    id: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    protocol: Optional[str] = None
    query: Optional[str] = None
    reason: Optional[str] = None
    scheme: Optional[str] = None
    size: Optional[UInt64] = None
    time: Optional[Timestamp] = None


class Response(ApiModel):
    """An HTTP response, or the equivalent for other protocols.

    :param backend_latency: Time spent in the backend handling the request
    :type backend_latency: Optional[timedelta]
    :param code: HTTP response status code
    :type code: Optional[int]
    :param size: Response size in bytes
    :type size: Optional[int]
    :param time: Time when the destination service sent the response
    :type time: Optional[datetime]
    """

    backend_latency: Optional[Duration] = None
    code: Optional[Int64] = None
    headers: Optional[Dict[str, str]] = None
    size: Optional[UInt64] = None
    time: Optional[Timestamp] = None


class Resource(ApiModel):
    """A resource involved in a network activity.

    :param name: Stable identifier of the resource within its service
    :type name: Optional[str]
    :param service: Name of the service the resource belongs to
    :type service: Optional[str]
    :param type: Resource type, e.g. "pubsub.googleapis.com/Topic"
    :type type: Optional[str]
    :param create_time: When the resource was created
    :type create_time: Optional[datetime]
    :param delete_time: When the resource was deleted
    :type delete_time: Optional[datetime]
    :param update_time: When the resource was last updated
    :type update_time: Optional[datetime]
    """

    annotations: Optional[Dict[str, str]] = None
    create_time: Optional[Timestamp] = None
    delete_time: Optional[Timestamp] = None
    display_name: Optional[str] = None
    etag: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    location: Optional[str] = None
    name: Optional[str] = None
    service: Optional[str] = None
    type: Optional[str] = None
    uid: Optional[str] = None
    update_time: Optional[Timestamp] = None


class AttributeContext(ApiModel):
    """The standard attribute vocabulary for Google APIs.

    An attribute describes an activity on a network service, for example
    the size of an HTTP request or the status code of a response.

    :param api: The API operation involved in the activity
    :type api: Optional[Api]
    :param destination: Receiver of the last hop
    :type destination: Optional[Peer]
    :param extensions: Extensions for advanced use cases
    :type extensions: Optional[List[Dict[str, Any]]]
    :param origin: Sender of the first hop
    :type origin: Optional[Peer]
    :param request: The network request
    :type request: Optional[Request]
    :param resource: Primary target resource of the activity
    :type resource: Optional[Resource]
    :param response: The network response
    :type response: Optional[Response]
    :param source: Sender of the last hop
    :type source: Optional[Peer]
    """

    api: Optional[Api] = None
    destination: Optional[Peer] = None
    extensions: Optional[List[Dict[str, Any]]] = None
    origin: Optional[Peer] = None
    request: Optional[Request] = None
    resource: Optional[Resource] = None
    response: Optional[Response] = None
    source: Optional[Peer] = None


class FirstPartyPrincipal(ApiModel):
    """First party identity principal."""

    principal_email: Optional[str] = None
    service_metadata: Optional[Dict[str, Any]] = None


class ThirdPartyPrincipal(ApiModel):
    """Third party identity principal."""

    third_party_claims: Optional[Dict[str, Any]] = None


class ServiceAccountDelegationInfo(ApiModel):
    """Identity delegation history of an authenticated service account."""

    first_party_principal: Optional[FirstPartyPrincipal] = None
    principal_subject: Optional[str] = None
    third_party_principal: Optional[ThirdPartyPrincipal] = None


class AuthenticationInfo(ApiModel):
    """Authentication information for the operation."""

    authority_selector: Optional[str] = None
    principal_email: Optional[str] = None
    principal_subject: Optional[str] = None
    service_account_delegation_info: Optional[List[ServiceAccountDelegationInfo]] = (
        None
    )
    service_account_key_name: Optional[str] = None
    third_party_principal: Optional[Dict[str, Any]] = None


class AuthorizationInfo(ApiModel):
    """Authorization information for the operation.

    :param granted: Whether the permission was granted
    :type granted: Optional[bool]
    :param permission: The required IAM permission
    :type permission: Optional[str]
    :param resource: The resource being accessed
    :type resource: Optional[str]
    :param resource_attributes: Attributes of the resource at check time
    :type resource_attributes: Optional[Resource]
    """

    granted: Optional[bool] = None
    permission: Optional[str] = None
    resource: Optional[str] = None
    resource_attributes: Optional[Resource] = None


class ViolationInfo(ApiModel):
    """A single organization policy violation."""

    checked_value: Optional[str] = None
    constraint: Optional[str] = None
    error_message: Optional[str] = None
    policy_type: Optional[PolicyType] = None


class OrgPolicyViolationInfo(ApiModel):
    """Organization policy violations for a request."""

    payload: Optional[Dict[str, Any]] = None
    resource_tags: Optional[Dict[str, str]] = None
    resource_type: Optional[str] = None
    violation_info: Optional[List[ViolationInfo]] = None


class PolicyViolationInfo(ApiModel):
    """Policy violation information, when a request was denied by policy."""

    org_policy_violation_info: Optional[OrgPolicyViolationInfo] = None


class RequestMetadata(ApiModel):
    """Metadata about the request."""

    caller_ip: Optional[str] = None
    caller_network: Optional[str] = None
    caller_supplied_user_agent: Optional[str] = None
    destination_attributes: Optional[Peer] = None
    request_attributes: Optional[Request] = None


class ResourceLocation(ApiModel):
    """Locations of a resource before and after an operation."""

    current_locations: Optional[List[str]] = None
    original_locations: Optional[List[str]] = None


class Status(ApiModel):
    """A logical error model, following ``google.rpc.Status``.

    :param code: Status code, a value of ``google.rpc.Code``
    :type code: Optional[int]
    :param details: Messages that carry the error details
    :type details: Optional[List[Dict[str, Any]]]
    :param message: Developer-facing error message in English
    :type message: Optional[str]
    """

    code: Optional[int] = None
    details: Optional[List[Dict[str, Any]]] = None
    message: Optional[str] = None


class AuditLog(ApiModel):
    """Common audit log format for Google Cloud Platform API operations.

    :param num_response_items: Number of items returned from a List or Query
        method, if applicable
    :type num_response_items: Optional[int]
    """

    authentication_info: Optional[AuthenticationInfo] = None
    authorization_info: Optional[List[AuthorizationInfo]] = None
    metadata: Optional[Dict[str, Any]] = None
    method_name: Optional[str] = None
    num_response_items: Optional[Int64] = None
    policy_violation_info: Optional[PolicyViolationInfo] = None
    request: Optional[Dict[str, Any]] = None
    request_metadata: Optional[RequestMetadata] = None
    resource_location: Optional[ResourceLocation] = None
    resource_name: Optional[str] = None
    resource_original_state: Optional[Dict[str, Any]] = None
    response: Optional[Dict[str, Any]] = None
    service_data: Optional[Dict[str, Any]] = None
    service_name: Optional[str] = None
    status: Optional[Status] = None


class ResourceInfo(ApiModel):
    """A resource referenced by an admission check."""

    container: Optional[str] = None
    location: Optional[str] = None
    name: Optional[str] = None
    permission: Optional[str] = None
    type: Optional[str] = None


class SpanContext(ApiModel):
    """Trace span identifier in the form
    ``projects/[PROJECT_ID]/traces/[TRACE_ID]/spans/[SPAN_ID]``."""

    span_name: Optional[str] = None


class CheckRequest(ApiModel):
    """Request message for the Check method.

    :param attributes: Attributes of the operation to be checked
    :type attributes: Optional[AttributeContext]
    :param flags: Optional check flags, for Google internal use
    :type flags: Optional[str]
    :param resources: Resources involved in the operation
    :type resources: Optional[List[ResourceInfo]]
    :param service_config_id: Service configuration id used for the check
    :type service_config_id: Optional[str]
    """

    attributes: Optional[AttributeContext] = None
    flags: Optional[str] = None
    resources: Optional[List[ResourceInfo]] = None
    service_config_id: Optional[str] = None


class CheckResponse(ApiModel):
    """Response message for the Check method.

    An empty ``status`` means the operation is allowed.
    """

    headers: Optional[Dict[str, str]] = None
    status: Optional[Status] = None


class ReportRequest(ApiModel):
    """Request message for the Report method.

    :param operations: Operations to report, at most 1000 per call
    :type operations: Optional[List[AttributeContext]]
    :param service_config_id: Service configuration id used for the report
    :type service_config_id: Optional[str]
    """

    operations: Optional[List[AttributeContext]] = None
    service_config_id: Optional[str] = None


class ReportResponse(ApiModel):
    """Response message for the Report method. Currently empty."""


class V2HttpRequest(ApiModel):
    """Information about an HTTP request, attached to a log entry.

    :param cache_fill_bytes: Bytes validated with the origin server
    :type cache_fill_bytes: Optional[int]
    :param latency: Request processing latency on the server
    :type latency: Optional[timedelta]
    :param request_size: Size of the HTTP request message in bytes
    :type request_size: Optional[int]
    :param response_size: Size of the HTTP response message in bytes
    :type response_size: Optional[int]
    """

    cache_fill_bytes: Optional[UInt64] = None
    cache_hit: Optional[bool] = None
    cache_lookup: Optional[bool] = None
    cache_validated_with_origin_server: Optional[bool] = None
    latency: Optional[Duration] = None
    protocol: Optional[str] = None
    referer: Optional[str] = None
    remote_ip: Optional[str] = None
    request_method: Optional[str] = None
    request_size: Optional[UInt64] = None
    request_url: Optional[str] = None
    response_size: Optional[UInt64] = None
    server_ip: Optional[str] = None
    status: Optional[int] = None
    user_agent: Optional[str] = None


class V2LogEntryOperation(ApiModel):
    """Information about an operation a log entry belongs to."""

    first: Optional[bool] = None
    id: Optional[str] = None
    last: Optional[bool] = None
    producer: Optional[str] = None


class V2LogEntrySourceLocation(ApiModel):
    """Source code location that produced a log entry."""

    file: Optional[str] = None
    function: Optional[str] = None
    line: Optional[Int64] = None


class V2LogEntry(ApiModel):
    """An individual log entry.

    :param http_request: HTTP request associated with the entry
    :type http_request: Optional[V2HttpRequest]
    :param severity: Severity of the entry
    :type severity: Optional[LogSeverity]
    :param timestamp: Time the event described by the entry occurred
    :type timestamp: Optional[datetime]
    """

    http_request: Optional[V2HttpRequest] = None
    insert_id: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    monitored_resource_labels: Optional[Dict[str, str]] = None
    name: Optional[str] = None
    operation: Optional[V2LogEntryOperation] = None
    proto_payload: Optional[Dict[str, Any]] = None
    severity: Optional[LogSeverity] = None
    source_location: Optional[V2LogEntrySourceLocation] = None
    struct_payload: Optional[Dict[str, Any]] = None
    text_payload: Optional[str] = None
    timestamp: Optional[Timestamp] = Field(None, description="Event time")
    trace: Optional[str] = None
