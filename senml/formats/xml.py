'''
# XML

The pack is the root element "sensml" in the SenML namespace, each record
is an empty "senml" element with the fields as attributes named like the
JSON keys:

    <sensml xmlns="urn:ietf:params:xml:ns:senml">
      <senml bn="dev123" n="temp" v="22.1"></senml>
    </sensml>
'''
import re
import xml.etree.ElementTree as ET

from . import Codec, register
from ..core import Record, Pack
from ..enum import Format
from ..exceptions import ParseException


XML_NAMESPACE = 'urn:ietf:params:xml:ns:senml'
ROOT_TAG = 'sensml'
RECORD_TAG = 'senml'

# characters outside the XML 1.0 Char production
INVALID_CHARS = re.compile('[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]')


def local_name(tag: str) -> str:
    '''Strip the "{namespace}" ElementTree puts in front of the tag'''
    return tag.rsplit('}', 1)[-1]


def record_to_element(record: Record, parent: ET.Element) -> ET.Element:
    element = ET.SubElement(parent, RECORD_TAG)
    for field, value in record.get_fields():
        if not field.is_empty(value):
            element.set(field.key, INVALID_CHARS.sub('\ufffd', field.to_text(value)))

    return element


def element_to_record(element: ET.Element) -> Record:
    record = Record()
    for key, text in element.attrib.items():
        field = Record._meta.get_by_key(local_name(key))
        if field is None:
            continue
        setattr(record, field.name, field.from_text(text))

    return record


@register(Format.XML)
class XMLCodec(Codec):

    def encode(self, pack: Pack) -> bytes:
        root = ET.Element(ROOT_TAG, xmlns=XML_NAMESPACE)
        for record in pack:
            record_to_element(record, root)

        if self.options.pretty_print:
            ET.indent(root, space='  ')

        return ET.tostring(root, encoding='unicode', short_empty_elements=False).encode('utf-8')

    def decode(self, data: bytes) -> Pack:
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise ParseException(f'error parsing XML: {e}') from e

        if local_name(root.tag) != ROOT_TAG:
            raise ParseException(f'expected element type <{ROOT_TAG}> but have <{local_name(root.tag)}>')

        return Pack(element_to_record(_) for _ in root if local_name(_.tag) == RECORD_TAG)
