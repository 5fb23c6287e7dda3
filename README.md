# termframe

A small toolkit for drawing text user interfaces in a terminal.

Widgets draw into a grid of cells (a `Buffer`). After each frame the new grid
is compared with the one before, and only the cells that changed are written
to the terminal. Double-width characters such as CJK glyphs take up two
columns; the second column holds a continuation cell that is never printed.

## Installation

```
pip install termframe
```

The only runtime dependency is `wcwidth`, used to measure character widths.

## What is in the box

- `termframe.geometry.Rect`: a rectangle of terminal cells, with `area()` and
  `inner(margin)`.
- `termframe.style`: the `Color` enum (`Color.RED`, `Color.BRIGHT_BLACK`,
  `Color.RESET`, ...), `Rgb(r, g, b)` and `Indexed(index)` colours (each value
  must be 0–255, otherwise `ValueError`), `Style` with `fg`, `bg`, `bold`,
  `underline`, `italic` and `patch(other)`, and `Span` (`Span.raw(text)`,
  `Span.styled(text, style)`).
- `termframe.buffer`: `Cell`, `Buffer` (`get_cell`, `set_cell`, `set_str`,
  `diff`, `mark_animated`) and `char_width`.
- `termframe.layout`: `Constraint.fixed(n)`, `Constraint.fill()`,
  `Constraint.ratio(num, den)` and `solve(constraints, total)`, which divides
  space among them.
- `termframe.widgets`: one module per widget, all built on
  `termframe.widgets.base.Widget`:
  - `text.Text`: one line of styled spans, clipped to its area.
  - `block.Block`: a box border with an optional `title`.
  - `bordered.Bordered`: a `Block` with a child drawn inside it.
  - `fill.Fill`: paints its area in one style.
  - `divider.Divider`: a horizontal or vertical rule.
  - `stack.VStack` / `stack.HStack`, plus the shortcuts `vstack(...)` and
    `hstack(...)` for plain-text lines and columns.
  - `centered.Centered`: centres a child by its natural size.
  - `padding.Padding`: insets a child (`Padding(top, right, bottom, left,
    child)`, `Padding.all`, `Padding.axes`).
  - `popup.Popup`: a background with an overlay centred on top.
  - `spinner.Spinner` with `SpinnerStyle.DOTS`, `LINE` and `ARC`.
  - `gauge.Gauge`: a ring that fills clockwise, with a percentage label.
  - `progress_bar.ProgressBar`: `[████░░░░] 50% (5/10)`.
  - `table.Table` and `table.Row`: a column grid with optional bold headers
    and a highlighted selected row.
- `termframe.terminal`: `Terminal`, `TerminalHandle`, `Frame` and
  `render_diff`, which turns two buffers into the escape sequences that
  update the screen.
- `termframe.progress`: `with_progress(iterable, handle)` and `ProgressIter`,
  which draw a live progress bar while you loop.

## Drawing into a buffer

Every widget has `render(area, buf)`. You can render into a buffer directly,
which is also how you test your own widgets:

```python
from termframe.buffer import Buffer
from termframe.geometry import Rect
from termframe.widgets.block import Block
from termframe.widgets.bordered import Bordered
from termframe.widgets.text import Text

area = Rect(0, 0, 20, 3)
buf = Buffer(area)
Bordered(Block(title="CPU"), Text.raw("42%")).render(area, buf)

print(buf.get_cell(1, 0).ch)   # 'C', the title sits on the top border
print(buf.get_cell(1, 1).ch)   # '4', the child sits inside the border
```

Writes outside the buffer are ignored, and `get_cell` returns `None` there.

## Layout

`VStack` and `HStack` divide their area among their children. Any widget
becomes a stack child with `.fixed(n)`, `.fill()` or `.ratio(num, den)`:

```python
from termframe.widgets.divider import Divider
from termframe.widgets.stack import HStack, VStack
from termframe.widgets.text import Text

screen = VStack([
    Text.raw("header").fixed(1),
    Divider().fixed(1),
    HStack([
        Text.raw("left").fill(),
        Text.raw("right").fill(),
    ]).fill(),
])
```

Fixed and ratio children are sized first, in order, and never take more than
is left; fill children then split the rest evenly, the first ones getting
one extra unit each when it does not divide.

## Tables

```python
from termframe.layout import Constraint
from termframe.style import Color, Span, Style
from termframe.widgets.table import Row, Table

table = Table(
    [Constraint.fixed(10), Constraint.fill()],
    [
        Row([[Span.raw("alice")], [Span.styled("active", Style(fg=Color.GREEN))]]),
        Row([[Span.raw("bob")], [Span.raw("away")]]),
    ],
    headers=["Name", "Status"],
    selected=1,
)
```

The selected row is painted across the full width with `highlight_style`
(a blue background by default) layered over each span's own style.

## Running on a real terminal

`Terminal()` puts the terminal into raw mode, switches to the alternate
screen and hides the cursor. `run()` starts a background render thread and
returns a `TerminalHandle`. Give the handle a function that draws a `Frame`;
it is called again on every resize and, while animated widgets such as
`Spinner` are shown, about 24 times a second.

```python
from termframe.style import Style
from termframe.terminal import Terminal
from termframe.widgets.centered import Centered
from termframe.widgets.spinner import Spinner, SpinnerStyle

handle = Terminal().run()

def draw(frame):
    frame.render(Centered(Spinner(SpinnerStyle.DOTS, Style(bold=True))), frame.area)

handle.render(draw)
handle.finished.wait()   # until Ctrl-C
```

Calling `handle.render` again replaces what is shown. `handle.shutdown()`
restores the terminal and waits for the render thread; `handle.finished` is
set once that has happened, and later `render` calls are ignored.

`Terminal` also accepts a `writer` to send output to, a `size=(width,
height)` to use instead of asking the terminal, and `raw_mode=False` to leave
the terminal mode alone.

## Progress bars for loops

```python
import time
from termframe.progress import with_progress
from termframe.terminal import Terminal

handle = Terminal().run()
with with_progress(range(100), handle) as items:
    for item in items:
        time.sleep(0.05)
handle.shutdown()
```

When the iterable has a length the bar shows a percentage; otherwise it
counts items. The bar is drawn as complete when the loop runs out, when
`close()` is called, or when the `with` block exits, so an early `break`
still leaves a full bar.

## Demo

The package installs a demo command. Pick one of `stats`, `table`, `layout`
or `progress`:

```
termframe-demo stats
```

`stats`, `table` and `layout` run until Ctrl-C; `progress` fills a bar over
100 steps and then exits.

## Limitations

- Input handling is limited to Ctrl-C, which shuts the terminal down. There
  are no key, mouse or focus events for widgets to react to.
- Running on a real terminal needs a POSIX system (`termios`). Buffers,
  layout and widgets work everywhere.
- Ctrl-C and resize tracking only work in raw mode; resizes are picked up
  only when `run()` is called from the main thread.

## Running the tests

```
pip install "termframe[test]"
pytest
```