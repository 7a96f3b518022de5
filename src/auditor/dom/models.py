# src/auditor/dom/models.py
from typing import List

from pydantic import BaseModel, Field


class ListStructure(BaseModel):
    ordered_lists: int = 0
    unordered_lists: int = 0
    definition_lists: int = 0
    list_items: int = 0
    orphan_list_items: int = 0  # <li> outside any <ul>, <ol> or <menu>
    empty_lists: int = 0


class FormStructure(BaseModel):
    forms_count: int = 0
    forms_with_action: int = 0
    fieldsets: int = 0
    legends: int = 0
    labels: int = 0
    inputs: int = 0


class TableStructure(BaseModel):
    tables_count: int = 0
    captions: int = 0
    headers: int = 0
    headers_with_scope: int = 0


class AriaStructure(BaseModel):
    buttons: int = 0
    buttons_with_aria_label: int = 0
    images: int = 0
    images_with_alt: int = 0
    has_main_role: bool = False  # role="main" or aria-label="main" on any element


class SemanticStructure(BaseModel):
    """
    Structural profile of an HTML string.

    Built by the StructureBuilder and consumed by the audit rules; it is the
    only thing rules see, so every check is a function of this model.
    """
    content_length: int = 0

    # Landmarks
    has_main_landmark: bool = False
    has_header_landmark: bool = False
    has_nav_landmark: bool = False
    has_footer_landmark: bool = False
    # Landmark names hinted at by class/id/role attributes ("header", "nav", "footer")
    landmark_hints: List[str] = Field(default_factory=list)

    # Headings, in document order
    heading_hierarchy: List[int] = Field(default_factory=list)

    # Sectioning
    sections_count: int = 0
    articles_count: int = 0
    aside_count: int = 0

    list_structure: ListStructure = Field(default_factory=ListStructure)
    form_structure: FormStructure = Field(default_factory=FormStructure)
    table_structure: TableStructure = Field(default_factory=TableStructure)
    aria_structure: AriaStructure = Field(default_factory=AriaStructure)
