"""ActivityStreams 2.0 object model and JSON-LD (de)serializer.

Usage::

    from asvocab import dumps, loads

    obj = loads('{"@context": "https://www.w3.org/ns/activitystreams", '
                '"type": "Link", "href": "https://example.com/"}')
    obj.get_property("href").value   # 'https://example.com/'
    dumps(obj)
"""

from asvocab.activitystreams import (
    ASType,
    Collection,
    CollectionPage,
    Link,
    Mention,
    Object,
    OrderedCollection,
    OrderedCollectionPage,
    Person,
    Place,
    Relationship,
)
from asvocab.config import parse_config
from asvocab.core.exceptions import (
    PropertyDecodeError,
    TypeMismatchError,
    UnhandledTypeError,
    UnregisteredTypeError,
    VocabularyError,
)
from asvocab.document import (
    alias_map_from_context,
    dumps,
    loads,
    serialize,
    to_type,
)
from asvocab.ordering import equivalent, normalize
from asvocab.registry import TypeRegistry

__all__ = [
    "ASType",
    "Collection",
    "CollectionPage",
    "Link",
    "Mention",
    "Object",
    "OrderedCollection",
    "OrderedCollectionPage",
    "Person",
    "Place",
    "PropertyDecodeError",
    "Relationship",
    "TypeMismatchError",
    "TypeRegistry",
    "UnhandledTypeError",
    "UnregisteredTypeError",
    "VocabularyError",
    "alias_map_from_context",
    "dumps",
    "equivalent",
    "loads",
    "normalize",
    "parse_config",
    "serialize",
    "to_type",
]
