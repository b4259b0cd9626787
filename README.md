# staticweb

A small HTTP/1.0 and HTTP/1.1 server that serves files from a directory
on disk. Each client connection is handled in its own thread, and a
connection can carry several requests one after another.

## What it does

- Accepts only `GET` requests whose protocol is `HTTP/1.0` or `HTTP/1.1`.
  The method and protocol are compared without regard to case. Any other
  method or protocol closes the connection and sends no response.
- Joins the request path onto the served directory. A request for `/`
  serves `index.html`.
- Picks the `Content-Type` from the text after the last dot in the path,
  using a built-in table. The match ignores case.
- Serves `404.html` from the served directory with status `404 NOT FOUND`
  when the requested file cannot be read or its extension is not in the
  table. If the chosen file cannot be examined, the connection is closed.
- Sends a `Connection` header. A `Connection` value sent by the client is
  echoed back. Without one, HTTP/1.0 requests get `close` and HTTP/1.1
  requests get `keep-alive`. After a `close` response the server closes
  the connection.
- Ignores most process signals when a `Server` is created. `SIGINT` and
  `SIGTERM` keep their normal behaviour.

## Installation

```
pip install .
```

## Usage

```
staticweb [PORT] [HOME]
```

`PORT` defaults to `80`. `HOME` is the directory to serve and defaults
to `../home`. The server listens on all interfaces and logs progress to
standard error. It runs until it is interrupted. An example:

```
staticweb 8080 ./site
```

The directory should contain an `index.html` and a `404.html`.

The exit status is `1` when the server cannot listen or cannot accept
connections. It is `130` after Ctrl-C.

## Using it from Python

```python
from staticweb.server import Server

with Server(8080) as server:
    server.run("./site")
```

`Server(0)` listens on a free port, and `server.port` reports which one.
`Server.run` blocks. It returns once `Server.close()` has been called,
for example from another thread.

The building blocks are available on their own:

- `staticweb.http.parse_request`: parses a request into an `HttpRequest`.
  It raises `RequestError` for a method or protocol it does not accept.
- `staticweb.http.construct_head`: renders an `HttpResponse` as a response
  head. It takes an optional `now` datetime for the `Date` header.
- `staticweb.resource.identify_type`: gives the content type for a path.
  It raises `UnknownTypeError` when the type cannot be worked out.
- `staticweb.resource.search_resource`: tells whether a file is readable.
- `staticweb.mime.mime_type`: looks up a suffix such as `".css"`.
- `staticweb.client.prepare_response`: chooses the file to send for a
  request and builds the response head values.
- `staticweb.client.serve_client`: serves one connected socket until it
  closes.
- `staticweb.transport.Listener`, `recv_request`, `send_head` and
  `send_body`: the socket-level pieces.

## What it does not do

- It handles only `GET` requests. It does not list directories, and it
  has no TLS and no configuration file.
- It does not check request paths. The path is appended to the served
  directory exactly as it was sent.

## Running the tests

```
pip install ".[test]"
pytest
```