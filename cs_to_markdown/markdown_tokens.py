"""Fixed Markdown fragments shared by the document renderer."""

LVL1 = "\t"
LVL2 = "\t\t"
LVL3 = "\t\t\t"

BULLET = "- "
H1 = "#"
H2 = "##"
H3 = "###"
H4 = "####"
