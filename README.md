# jrpctypes

Small types for the JSON-RPC 2.0 wire format: requests, notifications and
responses, checked when they are parsed, with step-by-step builders for
making them. The package uses only the standard library.

When parsing, the package enforces these rules:

- `"jsonrpc"` must be present and must be exactly the string `"2.0"`.
- `"id"` must be present in requests and responses and must be a string, a
  number or `null`. Integers that fit in 64 bits are kept as integers; larger
  integers and fractions are kept as floats.
- `"method"` must be a string.
- `"params"`, when present and not `null`, must be a JSON object or array.
- A response must carry `"result"` or `"error"`; an `"error"` must be an
  object with an integer `"code"` (32-bit) and a string `"message"`, and may
  carry `"data"`.

## Errors

All errors raised by the package derive from `jrpctypes.errors.JsonRpcError`:

- `SerializationError` (also a `ValueError`) for text that is not JSON, for
  JSON that breaks the rules above, and for values that cannot be written as
  JSON.
- `InvalidTypeError` (also a `TypeError`) when a value has the wrong type,
  for instance when an `Id` is read as the wrong kind.
- `JsonRpcError` itself when a builder is misused: a required part is missing
  at `build()`, or a part that may be set once is set twice.

`ServerErrorCode` raises a plain `ValueError` for a code outside its range.

## Requests

```python
from jrpctypes.request import Request

req = (
    Request.builder()
    .method("sort")
    .params([10, 293, 2, 193, 2])
    .id(2)
    .build()
)
text = req.to_json()

parsed = Request.from_json(
    '{"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id": 1}'
)
print(parsed.method, parsed.id.as_int(), parsed.params[0])
```

`params()` takes any JSON-serialisable object or list; `params_str()` takes
JSON text. Both reject values that are not an object or an array.
`Request.from_dict()` and `to_dict()` work with already-decoded JSON.

## Notifications

Notifications are requests without an id:

```python
from jrpctypes.notification import Notification

note = Notification.builder().method("event").params({"level": 3}).build()
parsed = Notification.from_json(
    '{"jsonrpc": "2.0", "method": "update", "params": [1, 2, 3, 4, 5]}'
)
```

## Params

`jrpctypes.params.Params` holds the structured parameters. It supports
indexing, `len()`, iteration and `in`, and has `is_object` and `is_array`.
Make one with `Params.from_json(text)` or `Params.from_value(value)`, and
write it with `to_json()`.

## Responses

A success response (the result is `null` unless set):

```python
from jrpctypes.response import Response

rsp = Response.builder().success().result([2, 2, 10]).id(2).build()
```

`result_str(text)` sets the result to the string `text` itself, not to JSON
parsed from it; `data_str` on the error builder does the same for `"data"`.

An error response using one of the codes defined by the specification
(`parse_error`, `invalid_request`, `method_not_found`, `invalid_params`,
`internal_error`; the codes are also listed in `ErrorCode`):

```python
rsp = Response.builder().error().invalid_request().id(2).build()
```

A custom error, optionally with extra data:

```python
rsp = (
    Response.builder()
    .error()
    .code(-23)
    .message("bad request")
    .data({"field": "name"})
    .id(2)
    .build()
)
```

Implementation-defined server errors use a code from -32099 to -32000 and
the message "Server error"; `server_error` rejects codes outside that range:

```python
rsp = Response.builder().error().server_error(-32050).id(7).build()
```

When answering a request, pass the request itself to `id()` to reuse its id:

```python
rsp = Response.builder().id(req).success().result(3).build()
```

A parsed response has a `status` that is either a `Success` (with `result`)
or a `Failure` (with `code`, `message` and `data`); `is_success` tells them
apart.

## Output

`to_json()` writes compact JSON. Optional members are always written: a
request or notification without parameters is written with `"params": null`,
and an error without data with `"data": null`. Both read back unchanged.

## Ids

`jrpctypes.ident.Id` wraps the id value with an `IdKind` (`STRING`, `NUMBER`,
`FRACTIONAL`, `NULL`). `Id.coerce()` makes one from a Python value, and
`Id.from_json_value()` from decoded JSON. Read it back with `as_str()`,
`as_int()`, `as_float()` or `as_null()`; reading the wrong kind raises
`InvalidTypeError`.

## What the package does not do

It only models messages. It does not send or receive them, dispatch calls
to methods, or handle batches (JSON arrays of several messages).

## Running the tests

```
pip install -e ".[test]"
pytest
```