# composecli

The core of a multi-container application command line, as a plain Python
library with no third-party dependencies. It provides:

- **Argument conversion** (`composecli.compat`): `convert` turns the arguments
  of a standalone invocation into the form a plugin host expects.
- **Service API models** (`composecli.api`): dataclasses for every operation's
  options and results, such as `CreateOptions`, `StartOptions`, `RunOptions`,
  `ContainerSummary`, `Stack` and `Event`, the `LogConsumer` and `Service`
  protocols, and `get_image_name_or_default`.
- **A delegating proxy** (`composecli.proxy`): `ServiceProxy` forwards each
  operation to a function held in its `<operation>_fn` attribute and runs
  interceptors on the project first for build, push, pull, create, up,
  convert and run_one_off_container. An operation with no function raises
  `NotImplementedApiError`.
- **Errors** (`composecli.errors`): an `ApiError` hierarchy (`NotFoundError`,
  `CanceledError`, `ParsingFailedError`, ...) with predicates such as
  `is_not_found_error` and `is_canceled`, which also look through errors
  raised `from` one another.
- **Labels** (`composecli.labels`): the label keys put on resources and
  `compose_version`, which reduces a version string to `MAJOR.MINOR.PATCH`.
- **Console output**: `composecli.tabwriter` (`TabWriter`,
  `print_pretty_section`) aligns tab-separated columns; `composecli.jsonfmt`
  (`to_json`, `to_standard_json`) renders compact or indented JSON;
  `composecli.output` (`print_formatted`) picks the pretty, JSON or legacy
  template JSON form; `composecli.colors` hands out rotating ANSI colours;
  `composecli.logformat` (`LogConsumer`) prefixes each log line with an
  aligned, coloured container name.
- **Listing and option helpers**: `composecli.listing` holds the logic
  behind `ps`, `ls`, `top` and `images` (`run_ps`, `run_list`, `run_top`,
  `run_images`, `displayable_ports`, `ellipsis`, `human_size`, ...);
  `composecli.options` holds `CreateFlags`, `UpFlags`, `validate_flags`,
  `parse_scale`, `run_version` and `escape_dollar_sign`.

## Converting standalone arguments

```python
from composecli.compat import convert

convert(["--context", "foo", "-f", "compose.yaml", "up"])
# ['--context', 'foo', 'compose', '-f', 'compose.yaml', 'up']

convert(["--verbose"])
# ['--debug', 'compose']
```

A root flag that needs a value but has none raises
`MissingFlagArgumentError`.

## Printing tables

```python
import sys
from composecli.output import print_formatted

rows = [{"Name": "web", "Status": "running"}]

def write_rows(w):
    for row in rows:
        w.write(f"{row['Name']}\t{row['Status']}\n")

print_formatted(rows, "pretty", sys.stdout, write_rows, "NAME", "STATUS")
print_formatted(rows, "json", sys.stdout, write_rows, "NAME", "STATUS")
```

The format `"pretty"` (or an empty string) prints an aligned table. `"json"`
prints the whole list as one JSON document, and `"{{json.}}"` prints one JSON
object per line. Any other format raises `ParsingFailedError`.

## Proxying a backend

```python
from composecli.api import PsOptions
from composecli.proxy import ServiceProxy

proxy = ServiceProxy().with_service(my_backend)
proxy.with_interceptor(lambda project: print("about to act on", project))
containers = proxy.ps("myproject", PsOptions(all=True))
```

`my_backend` is any object with the methods of the `Service` protocol.

## Validating `up` flags

```python
from composecli.options import CreateFlags, UpFlags, validate_flags, parse_scale

validate_flags(UpFlags(wait=True), CreateFlags())
parse_scale("web=3")   # ('web', 3)
```

Conflicting flags, such as `--build` together with `--no-build`, raise
`ValueError` with the message the command line would print.

## What this package does not do

There is no command to run: the package has no entry point and no argument
parser for the commands it helps with. It does not talk to a container
engine, load or interpolate project files, or resolve image digests; the
`Service` protocol is the place where such a backend plugs in, and none is
included.

## Running the tests

Install the `test` extra and run `pytest` from the project root.