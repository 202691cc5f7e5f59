"""Output sink shared by the demo applications.

Demos never print directly; they call the sink with one line at a time.
The CLI passes click.echo, tests pass a list's append.
"""

from collections.abc import Callable

OutputSink = Callable[[str], None]
