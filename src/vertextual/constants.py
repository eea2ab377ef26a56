"""Built-in example network and the shorthand syntax guide."""

DEFAULT_TITLE = "The software development process"

DEFAULT_CONNECTIONS = "\n".join([
    "Daydream > Daydream",
    "Daydream > Idea",
    "> Sketch",
    "> Prototype",
    "> Test",
    "> Evaluate",
    "> Refine",
    "> Sketch",
    "^ Polish",
    "> Refine",
    "^ Ship it!",
    "> Daydream",
])

CONFIG_FILENAME = ".vertextual.json"

# (heading, body, example) triples shown by `vertextual help`
SYNTAX_GUIDE = [
    (
        "Building networks from text",
        "Name the nodes of a network and their edges, one edge per line. "
        "The first edge has to be fully defined as Origin > Destination.",
        "Daydream > Idea",
    ),
    (
        "Reuse the last destination",
        "Omit the origin and the last destination becomes the new origin.",
        "Daydream > Idea\n> Sketch\n> Prototype",
    ),
    (
        "Reuse the last origin",
        "Start a line with ^ to keep the last origin.",
        "Daydream > Idea\n^ Sketch\n^ Prototype",
    ),
    (
        "Loops",
        "Loop back to an existing node for circular networks. "
        "Bi-directional edges and self-loops are allowed.",
        "Polish > Refine\n> Polish\nDaydream > Daydream",
    ),
    (
        "Order and duplicates",
        "Edges can be named in any order. Duplicate edges are removed.",
        "A > B\nA > B",
    ),
]
