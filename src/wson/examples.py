"""
Example WSON document used by the demo script and tests.

EXAMPLE_TEXT exercises every value kind, all three comment styles, both
key separators and a trailing comma. `build_example_document` builds the
Document that EXAMPLE_TEXT parses to.
"""
from wson.values import (
    Array,
    Bool,
    Date,
    DateTime,
    Document,
    Float,
    Int,
    Null,
    Object,
    String,
    Version,
)

EXAMPLE_TEXT = """\
# Service configuration
{
    name = "inventory-api",      // quoted string
    enabled: true,
    replicas = 3,
    ratio = 0.75e0,
    release = 2.4.1,
    launched = 2023-11-05,
    last_deploy = 2024-02-29 13:45:00,
    owner = null,
    /* block comments
       may span lines */
    tags = ["blue", "green",],
    limits = {
        cpu = 1.5e0,
        memory: 512,
        burst = [1, 2, 3]
    },
}
"""


def build_example_document() -> Document:
    limits = Document()
    limits["cpu"] = Float(1.5)
    limits["memory"] = Int(512)
    limits["burst"] = Array((Int(1), Int(2), Int(3)))

    document = Document()
    document["name"] = String("inventory-api")
    document["enabled"] = Bool(True)
    document["replicas"] = Int(3)
    document["ratio"] = Float(0.75)
    document["release"] = Version((2, 4, 1))
    document["launched"] = Date("2023-11-05")
    document["last_deploy"] = DateTime("2024-02-29 13:45:00")
    document["owner"] = Null()
    document["tags"] = Array((String("blue"), String("green")))
    document["limits"] = Object(limits)
    return document
