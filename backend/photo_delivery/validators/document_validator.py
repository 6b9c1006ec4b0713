"""Document Validator — well-formedness of the metadata document (PHOTO.XML).

Independent of the package model: it checks only the raw document text.
Field-by-field reconciliation against PhotoInfo records is not attempted here.
"""

import re
import xml.etree.ElementTree as ET

from photo_delivery.validators.models import ErrorCode, Finding
from photo_delivery.validators.reference_data import (
    DOCUMENT_ENCODINGS,
    DOCUMENT_REQUIRED_SECTIONS,
    DOCUMENT_ROOT_ELEMENT,
    FOLDER_NAMES,
)

XML_DECLARATION = re.compile(r"^<\?xml\s[^>]*\?>")
DECLARED_ENCODING = re.compile(r"""encoding\s*=\s*["']([^"']+)["']""")

DOCUMENT_NAME = FOLDER_NAMES["photo_xml"]


class DocumentValidator:
    """Checks the declared encoding, XML syntax, and required top-level sections."""

    name = "DocumentValidator"

    def validate(self, raw: str) -> list[Finding]:
        if not isinstance(raw, str):
            raise TypeError(f"Metadata document must be a str, got {type(raw).__name__}")

        findings = []
        text = raw.lstrip("\ufeff")

        # 1. Declared encoding
        declaration = XML_DECLARATION.match(text)
        if declaration:
            encoding = DECLARED_ENCODING.search(declaration.group(0))
            if encoding and encoding.group(1).lower() not in DOCUMENT_ENCODINGS:
                findings.append(Finding(
                    code=ErrorCode.XML_ENCODING_ERROR,
                    message="XMLの文字コードが不正です",
                    target_file=DOCUMENT_NAME,
                    details=f"encoding=\"{encoding.group(1)}\" (UTF-8 または Shift_JIS を指定してください)",
                ))

        # 2. Syntax; the declaration is dropped, the text is already decoded
        body = XML_DECLARATION.sub("", text, count=1)
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            findings.append(Finding(
                code=ErrorCode.INVALID_XML_STRUCTURE,
                message="XML構造が不正です",
                target_file=DOCUMENT_NAME,
                details=str(e),
            ))
            return findings

        # 3. Required elements
        if root.tag != DOCUMENT_ROOT_ELEMENT:
            findings.append(Finding(
                code=ErrorCode.INVALID_XML_STRUCTURE,
                message="XML構造が不正です",
                target_file=DOCUMENT_NAME,
                target_field=DOCUMENT_ROOT_ELEMENT,
                details=f"ルート要素は <{DOCUMENT_ROOT_ELEMENT}> である必要があります (値: <{root.tag}>)",
            ))
            return findings

        for section in DOCUMENT_REQUIRED_SECTIONS:
            if root.find(section) is None:
                findings.append(Finding(
                    code=ErrorCode.INVALID_XML_STRUCTURE,
                    message="XML構造が不正です",
                    target_file=DOCUMENT_NAME,
                    target_field=section,
                    details=f"<{section}> 要素が不足しています",
                ))

        return findings
