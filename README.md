# eppkit

Request and response types for the Extensible Provisioning Protocol (EPP,
RFC 5730), the XML protocol that registrars use to talk to domain registries.

eppkit builds EPP command documents as text and parses the documents a
registry sends back. It has no runtime dependencies; XML handling uses
`xml.etree.ElementTree` from the standard library.

## Installation

```
pip install eppkit
```

## What is covered

- Session: `hello_document()`, `Greeting` and `parse_greeting()` in
  `eppkit.hello`; `Logout` in `eppkit.logout`.
- Hosts (RFC 5733): `HostCheck`, `HostCreate`, `HostInfo`, `HostUpdate` and
  `HostDelete` in `eppkit.host.check`, `.create`, `.info`, `.update` and `.delete`,
  with the response types `HostCheckResponse`, `HostCreateResponse` and
  `HostInfoResponse`.
- Message queue: `MessagePoll` and `MessagePollResponse` in
  `eppkit.message.poll`; `MessageAck` in `eppkit.message.ack`.
- Extensions:
  - `NameStore` in `eppkit.extensions.namestore`.
  - `GMonthDay`, `Update` and `UpdateWithNameStore` in
    `eppkit.extensions.consolidate`.
  - `RgpUpdate` in `eppkit.extensions.rgp.update`. It wraps
    `RgpRestoreRequest` from `eppkit.extensions.rgp.request` or
    `RgpRestoreReport` from `eppkit.extensions.rgp.report`.
    `RgpRequestResponse` reads the RGP statuses in a reply.

## Building a request

```python
from eppkit.host.check import HostCheck
from eppkit.request import serialize_command

command = HostCheck(["ns1.example.com", "ns2.example.com"])
xml_text = serialize_command(command, "client-tr-id-1")
```

The result is a complete document. It starts with the XML declaration, then
`\r\n`, then the `<epp>` element. `command_document()` returns the same
document as an `ElementTree` element instead of text.

To send an extension with a command, pass it as the third argument:

```python
from eppkit.extensions.namestore import NameStore

xml_text = serialize_command(command, "client-tr-id-2", NameStore("com"))
```

Host commands take their values directly:

```python
from eppkit.host.create import HostCreate
from eppkit.host.update import HostAddRemove, HostChangeInfo, HostUpdate

create = HostCreate("ns1.example.com", ["192.0.2.1", "2001:db8::1"])
update = HostUpdate(
    "ns1.example.com",
    add=HostAddRemove(addresses=["192.0.2.2"]),
    remove=HostAddRemove(statuses=["clientDeleteProhibited"]),
    change_info=HostChangeInfo("ns2.example.com"),
)
```

Address strings are parsed with `ipaddress.ip_address`. An invalid address
raises `ValueError`.

## Reading a response

`parse_response(text, res_data, extension)` parses the common parts of a
`<response>`: the result, the transaction ids and the message queue. If you
pass a parser, it is called on the `<resData>` element or on the `<extension>`
element. Each response type has a `from_element` class method that you can use
as that parser:

```python
from eppkit.host.check import HostCheckResponse
from eppkit.response import parse_response

response = parse_response(reply_text, HostCheckResponse.from_element)
if response.result.code.is_success():
    for host in response.res_data.hosts:
        print(host.id, host.available)
print(response.tr_ids.server_tr_id)
```

Extension data is read the same way:

```python
from eppkit.extensions.namestore import NameStore

response = parse_response(reply_text, extension=NameStore.from_element)
print(response.extension.subproduct)
```

Other points about responses:

- `parse_status()` reads only the result and the transaction ids. This suits
  error replies.
- Result codes are members of the `ResultCode` enum. `ResultCode.from_code()`
  looks a code up by its number and returns `None` for an unknown code.
- `is_success()` is true for the 1xxx codes.
- Malformed XML, a missing required element, an unknown result code or a bad
  timestamp raises `XmlError`, a subclass of `ValueError`.
- Timestamps come back as timezone-aware UTC `datetime` objects.

A poll reply carries its message in `response.message_queue`. It has `count`,
`id`, `date` and `message`. With `MessagePollResponse.from_element`,
`res_data.message_data` holds one of two things:

- a `HostInfoData`;
- a domain transfer record with `name`, `transfer_status`, `requester_id`,
  `requested_at`, `ack_id`, `ack_by` and `expiring_at`.

## Greeting

```python
from eppkit.hello import hello_document, parse_greeting
from eppkit.xmlcodec import serialize

hello_text = serialize(hello_document())

greeting = parse_greeting(greeting_text)
print(greeting.service_id, greeting.service_date)
print(greeting.svc_menu.version, greeting.svc_menu.lang, greeting.svc_menu.obj_uris)
print(greeting.dcp.access, greeting.dcp.expiry)
```

## Extensions for domain updates

The consolidate and RGP extensions are meant to be sent with a domain
`<update>`. They produce their extension elements like any other `Extension`:

```python
from eppkit.extensions.consolidate import GMonthDay, Update
from eppkit.extensions.rgp.request import RgpRestoreRequest
from eppkit.extensions.rgp.update import RgpUpdate

sync = Update(GMonthDay(5, 31))        # <sync:expMonthDay>--05-31</sync:expMonthDay>
restore = RgpUpdate(RgpRestoreRequest())
```

`GMonthDay` raises `ValueError` if the month or day is out of range.

## What eppkit does not do

- It opens no connections. It does no framing, TLS or session handling. You
  send and receive the XML over your own transport.
- It has no login command.
- It has no domain or contact commands.

To use the consolidate or RGP extensions, you need your own domain update
command. Subclass `eppkit.request.Command`, set `COMMAND = "update"`, and
return the `<update>` element from `to_element()`.