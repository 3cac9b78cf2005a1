"""
Copies the attributes of a Saferpay XML fragment into a parameter collection.

Saferpay answers (and the signed confirmation handed back to the shop) are
a single element whose attributes carry the transaction data, e.g.

    <IDP MSGTYPE="PayConfirm" ID="..." AMOUNT="1095" ACCOUNTID="..."/>

Only the root element's attributes are read; child elements are ignored.
"""

import re

from lxml import etree

from saferpay.engine.errors import InvalidResponseFormat
from saferpay.models.parameters import ParameterCollection

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)

# The content is already decoded text, so a declared encoding no longer applies.
_XML_DECLARATION = re.compile(r"^<\?xml[^>]*\?>")


def parse_fragment(xml: str) -> dict[str, str]:
    """
    Parse a fragment and return its root attributes in document order.

    Raises:
        InvalidResponseFormat: If the content is not well-formed XML.
    """
    text = _XML_DECLARATION.sub("", xml.strip(), count=1).strip()
    try:
        root = etree.fromstring(text, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise InvalidResponseFormat(xml, str(e)) from e
    return dict(root.attrib)


def fill_from_xml(collection: ParameterCollection, xml: str) -> ParameterCollection:
    """
    Set every root attribute of ``xml`` on ``collection``.

    The fragment is parsed completely before the collection is touched, so
    a malformed fragment leaves it unchanged.
    """
    collection.update(parse_fragment(xml))
    return collection
