"""
Recursive signer tree rendering.

This module walks a ``Signer`` tree depth-first (pre-order) and produces
a render-ready ``SignerNode`` tree. The node tree is pure data: it holds
names, metadata rows, capacity rows and signature areas, still carrying
``TranslatedString`` values. Language resolution and markup happen later,
in the Jinja templates.

Traversal contract:

1. A node is emitted for the current signer. Its own metadata rows keep
   their insertion order and get capitalized keys.
2. At the top level only, block metadata (date, location) is appended to
   the signer's own rows, in the same table. Nested representatives never
   receive block metadata.
3. If the signer has representatives, each one is rendered in list order
   as: the nested signer node, a "Capacity" row, a signature area.
4. At the top level only, one signature area for the root signer closes
   the block.

A tree therefore yields one signature area per representative (at any
depth) plus one for the root. Nothing is sorted, deduplicated or visited
twice, and rendering the same tree twice yields equal nodes.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from doctemplates.app.i18n import labels
from doctemplates.app.i18n.translated_string import TranslatedString
from doctemplates.app.schemas.metadata import MetadataEntry
from doctemplates.app.schemas.signature_page import (
    DisplayMode,
    LegalEntity,
    SignatoryGroup,
    SignatureKind,
    SignaturePage,
    SignatureStyle,
    Signer,
    SignerBlock,
    SignerBlockStyle,
)


_FROZEN = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Render nodes
# ---------------------------------------------------------------------------


class NameStyle(str, Enum):
    HEADING = "heading"
    BOLD = "bold"
    PLAIN = "plain"


class SignatureArea(BaseModel):
    model_config = _FROZEN

    kind: SignatureKind
    label: Optional[TranslatedString] = None
    printed_name: Optional[str] = None


class RepresentativeNode(BaseModel):
    model_config = _FROZEN

    signer: SignerNode
    capacity: MetadataEntry
    signature: SignatureArea


class SignerNode(BaseModel):
    model_config = _FROZEN

    name: str
    name_style: NameStyle
    is_top_level: bool
    metadata_rows: Tuple[MetadataEntry, ...] = ()
    represented_by: Tuple[RepresentativeNode, ...] = ()
    signature: Optional[SignatureArea] = None


RepresentativeNode.model_rebuild()


# ---------------------------------------------------------------------------
# Signature areas
# ---------------------------------------------------------------------------


def signature_area(style: SignatureStyle, signer_name: str) -> SignatureArea:
    """Map a signature style to the fragment drawn for one signer."""
    if style.kind == SignatureKind.BOX:
        return SignatureArea(kind=style.kind, label=style.label)
    if style.kind == SignatureKind.LINE_WITH_NAME:
        return SignatureArea(kind=style.kind, printed_name=signer_name)
    if style.kind == SignatureKind.IMAGE_PLACEHOLDER:
        return SignatureArea(kind=style.kind, label=labels.DIGITAL_SIGNATURE)
    return SignatureArea(kind=style.kind)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def _name_style(signer: Signer, is_top_level: bool) -> NameStyle:
    if isinstance(signer, LegalEntity):
        return NameStyle.HEADING if is_top_level else NameStyle.BOLD
    return NameStyle.BOLD if is_top_level else NameStyle.PLAIN


def render_signer_tree(
    signer: Signer,
    *,
    block_metadata: Tuple[MetadataEntry, ...] = (),
    is_top_level: bool = True,
    signature_style: Optional[SignatureStyle] = None,
) -> SignerNode:
    style = signature_style or SignatureStyle.line()

    rows = tuple(
        MetadataEntry(key=entry.key.capitalized(), value=entry.value)
        for entry in signer.metadata
    )
    if is_top_level:
        rows += tuple(block_metadata)

    represented_by = tuple(
        RepresentativeNode(
            signer=render_signer_tree(
                representative.signer,
                is_top_level=False,
                signature_style=style,
            ),
            capacity=MetadataEntry(
                key=labels.CAPACITY,
                value=representative.capacity,
            ),
            signature=signature_area(style, representative.signer.name),
        )
        for representative in signer.representatives
    )

    return SignerNode(
        name=signer.name,
        name_style=_name_style(signer, is_top_level),
        is_top_level=is_top_level,
        metadata_rows=rows,
        represented_by=represented_by,
        signature=signature_area(style, signer.name) if is_top_level else None,
    )


def render_signer_block(block: SignerBlock) -> SignerNode:
    return render_signer_tree(
        block.signer,
        block_metadata=block.metadata,
        is_top_level=True,
        signature_style=block.signature_style,
    )


# ---------------------------------------------------------------------------
# Inspection helpers
# ---------------------------------------------------------------------------


def iter_signer_nodes(node: SignerNode) -> Iterator[SignerNode]:
    """Yield every signer node in pre-order."""
    yield node
    for representative in node.represented_by:
        yield from iter_signer_nodes(representative.signer)


def count_capacity_rows(node: SignerNode) -> int:
    return sum(len(n.represented_by) for n in iter_signer_nodes(node))


def count_signature_areas(node: SignerNode) -> int:
    own = 1 if node.signature is not None else 0
    return own + count_capacity_rows(node)


# ---------------------------------------------------------------------------
# Page sections
# ---------------------------------------------------------------------------


class BlockSection(BaseModel):
    model_config = _FROZEN

    title: Optional[TranslatedString] = None
    root: SignerNode
    style: SignerBlockStyle


class GroupSection(BaseModel):
    model_config = _FROZEN

    name: Optional[TranslatedString] = None
    metadata_rows: Tuple[MetadataEntry, ...] = ()
    blocks: Tuple[BlockSection, ...]


class SignatureSections(BaseModel):
    model_config = _FROZEN

    display_mode: DisplayMode
    groups: Tuple[GroupSection, ...]

    @property
    def blocks(self) -> Tuple[BlockSection, ...]:
        return tuple(block for group in self.groups for block in group.blocks)


def _block_section(block: SignerBlock) -> BlockSection:
    return BlockSection(
        title=block.title,
        root=render_signer_block(block),
        style=block.style,
    )


def _group_sections(
    group: SignatoryGroup,
    display_mode: DisplayMode,
) -> Tuple[GroupSection, ...]:
    group_rows = tuple(
        MetadataEntry(key=entry.key.capitalized(), value=entry.value)
        for entry in group.metadata
    )

    if display_mode == DisplayMode.SEPARATE_SIGNATORIES:
        # Every member stands alone, titled with the group name and
        # carrying the group metadata as block metadata.
        return tuple(
            GroupSection(
                blocks=(
                    _block_section(
                        SignerBlock(
                            title=group.name,
                            signer=signer,
                            metadata=group_rows,
                            signature_style=group.signature_style,
                        )
                    ),
                )
            )
            for signer in group.signers
        )

    return (
        GroupSection(
            name=group.name,
            metadata_rows=group_rows,
            blocks=tuple(
                _block_section(
                    SignerBlock(
                        signer=signer,
                        signature_style=group.signature_style,
                    )
                )
                for signer in group.signers
            ),
        ),
    )


def build_signature_sections(page: SignaturePage) -> SignatureSections:
    groups: Tuple[GroupSection, ...] = ()
    for signatory in page.signatories:
        if isinstance(signatory, SignatoryGroup):
            groups += _group_sections(signatory, page.display_mode)
        else:
            groups += (GroupSection(blocks=(_block_section(signatory),)),)

    return SignatureSections(display_mode=page.display_mode, groups=groups)
