from typing import Any


# Annotation for record identifiers. Cursors are identifiers too.
Identifier = str

# Annotation for records: dicts with an identifier field and some payload fields
RecordDict = dict[str, Any]
