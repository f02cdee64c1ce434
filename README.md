# sencha

A small, backend-agnostic game-engine core.

- **Logging** (`sencha.sinks`, `sencha.logger`): `LoggingProvider` hands out
  one cached `Logger` per owner (a class, an instance or a name) and fans
  messages out to its sinks. `ConsoleLogSink` writes Debug to Warning records
  to stdout and Error and above to stderr; `FileLogSink` writes to a file and,
  on creation, rotates earlier files with `rotate_logs` (`name.ext` becomes
  `name-1.ext`, and so on, keeping at most three). Records look like
  `[YYYY-MM-DD HH:MM:SS.mmm] [LEVEL] category: message`. Logger methods
  (`debug`, `info`, `warn`, `error`, `critical`) accept `str.format`-style
  arguments.
- **Services** (`sencha.services`): `ServiceHost` owns `Service` objects and
  resolves them by concrete type, or by an `interface` they were registered
  under. `get` raises `ServiceNotRegisteredError` when nothing is registered;
  `try_get`, `has`, `get_all`, `remove_service` and `remove_all` round it out.
  `ServiceProvider` is a short-lived view used while constructing systems;
  after `invalidate()` any lookup raises `RuntimeError`.
- **Systems** (`sencha.systems`): `SystemHost` runs `init` and `update` on
  `System` objects by ascending order value and `shutdown` in reverse.
  A system added after `init` is initialised at once; each type may be added
  only once.
- **Batches** (`sencha.batch`): `RefBatch` keeps a packed list of references
  to objects owned elsewhere (membership by identity, swap-and-pop removal);
  `DataBatch` owns its items and hands out `DataBatchKey`s that stay valid
  across removals and `sort_if_dirty`.
- **Math** (`sencha.vec`): `Vec`, an N-dimensional vector with arithmetic,
  `dot`, `cross` (3D only), `normalized`, `lerp`, `distance` and
  `sqr_distance`.
- **Rendering** (`sencha.render`): `RenderContextService` manages render
  contexts, each backed by a `GraphicsAPI`; `RenderSystem` draws every visible
  `Renderable`, sorted by `render_order()`, into every active, valid context.

## Install

```
pip install .
```

## Example

```python
from sencha.batch import RefBatch
from sencha.render import RenderContextService, RenderSystem
from sencha.services import ServiceHost, ServiceProvider
from sencha.sinks import ConsoleLogSink, LogLevel
from sencha.systems import SystemHost

services = ServiceHost()
log_provider = services.logging_provider
log_provider.add_sink(ConsoleLogSink)
log_provider.set_min_level(LogLevel.INFO)

services.add_service(RenderContextService, log_provider)
services.add_service(RefBatch)

provider = ServiceProvider(services)
systems = SystemHost()
systems.add_system(RenderSystem, 0, provider)
provider.invalidate()

systems.init()
systems.update()
systems.shutdown()
```

Vectors:

```python
from sencha.vec import Vec

a = Vec(1.0, 2.0, 3.0)
b = Vec(4.0, 5.0, 6.0)
print(a + b, a.dot(b), a.cross(b))   # (5, 7, 9) 32.0 (-3, 6, -3)
```

## Demo

A console demo renders three frames into two fake windows and runs a small
particle simulation:

```
sencha-demo
```

It also writes its log to `game.log` in the current directory, rotating
earlier logs to `game-1.log` … `game-3.log`.

## What it does not do

There is no real graphics or windowing backend. Drawing happens only through
a `GraphicsAPI` subclass you supply; the demo's `ConsoleGraphicsAPI` just
prints each frame step.

## Tests

```
pip install .[test]
pytest
```