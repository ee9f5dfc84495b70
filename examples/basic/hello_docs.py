"""Parse a documentation snippet and render it to HTML and plain text."""

from clawmark import parse, render, render_text

doc = parse("## Hello **World**\n\nSee the [guide](https://example.test) and run `make`.")
print(render(doc))
print(render_text(doc))
