# src/auditor/dom/builder.py
import logging
import re
from typing import List

from bs4 import BeautifulSoup, Tag

from .models import (
    AriaStructure,
    FormStructure,
    ListStructure,
    SemanticStructure,
    TableStructure,
)

logger = logging.getLogger(__name__)

_HEADING_TAG = re.compile(r"^h([1-6])$")
_LIST_CONTAINERS = ["ul", "ol", "menu"]

# Attribute keywords that suggest a landmark is being built out of generic elements
_LANDMARK_HINTS = {
    "header": re.compile(r"(?:^|[\s_-])(?:header|masthead)"),
    "nav": re.compile(r"(?:^|[\s_-])(?:nav|menu)"),
    "footer": re.compile(r"(?:^|[\s_-])footer"),
}


def _attr_text(tag: Tag, name: str) -> str:
    """Returns an attribute as lower-cased text (bs4 gives lists for multi-valued attributes)."""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = " ".join(value)
    return str(value).lower()


class StructureBuilder:
    """
    Builder responsible for parsing raw HTML into a SemanticStructure profile.
    It counts landmarks, headings, sectioning, list, form, table and ARIA features.
    """

    def build(self, html: str) -> SemanticStructure:
        """
        Parses raw HTML into its structural profile.

        Args:
            html (str): The raw HTML string (a full document or a fragment).

        Returns:
            SemanticStructure: Counts and flags used by the audit rules.
        """
        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = html.replace('\ufeff', '')
        soup = BeautifulSoup(clean_html, 'html.parser')

        structure = SemanticStructure(
            content_length=len(html),
            has_main_landmark=soup.find('main') is not None,
            has_header_landmark=soup.find('header') is not None,
            has_nav_landmark=soup.find('nav') is not None,
            has_footer_landmark=soup.find('footer') is not None,
            landmark_hints=self._landmark_hints(soup),
            heading_hierarchy=self._heading_hierarchy(soup),
            sections_count=len(soup.find_all('section')),
            articles_count=len(soup.find_all('article')),
            aside_count=len(soup.find_all('aside')),
            list_structure=self._list_structure(soup),
            form_structure=self._form_structure(soup),
            table_structure=self._table_structure(soup),
            aria_structure=self._aria_structure(soup),
        )
        logger.debug(
            "Built structure: %d headings, %d sections, main=%s",
            len(structure.heading_hierarchy), structure.sections_count, structure.has_main_landmark
        )
        return structure

    @staticmethod
    def _heading_hierarchy(soup: BeautifulSoup) -> List[int]:
        """Heading levels (h1 -> 1) in document order."""
        levels = []
        for tag in soup.find_all(_HEADING_TAG):
            match = _HEADING_TAG.match(tag.name)
            if match:
                levels.append(int(match.group(1)))
        return levels

    @staticmethod
    def _landmark_hints(soup: BeautifulSoup) -> List[str]:
        """
        Landmark names suggested by class, id or role attributes of elements
        that are not that landmark themselves (e.g. <div class="site-footer">).
        """
        hints: List[str] = []
        for tag in soup.find_all(True):
            haystack = " ".join(_attr_text(tag, attr) for attr in ("class", "id", "role"))
            if not haystack.strip():
                continue
            for landmark, pattern in _LANDMARK_HINTS.items():
                if landmark in hints or tag.name == landmark:
                    continue
                if pattern.search(haystack):
                    hints.append(landmark)
        return sorted(hints)

    @staticmethod
    def _list_structure(soup: BeautifulSoup) -> ListStructure:
        items = soup.find_all('li')
        containers = soup.find_all(['ul', 'ol'])
        return ListStructure(
            ordered_lists=len(soup.find_all('ol')),
            unordered_lists=len(soup.find_all('ul')),
            definition_lists=len(soup.find_all('dl')),
            list_items=len(items),
            orphan_list_items=sum(1 for li in items if li.find_parent(_LIST_CONTAINERS) is None),
            # A list without child elements and without text
            empty_lists=sum(
                1 for lst in containers
                if lst.find(True) is None and not lst.get_text(strip=True)
            ),
        )

    @staticmethod
    def _form_structure(soup: BeautifulSoup) -> FormStructure:
        forms = soup.find_all('form')
        return FormStructure(
            forms_count=len(forms),
            forms_with_action=sum(1 for form in forms if form.has_attr('action')),
            fieldsets=len(soup.find_all('fieldset')),
            legends=len(soup.find_all('legend')),
            labels=len(soup.find_all('label')),
            inputs=len(soup.find_all('input')),
        )

    @staticmethod
    def _table_structure(soup: BeautifulSoup) -> TableStructure:
        headers = soup.find_all('th')
        return TableStructure(
            tables_count=len(soup.find_all('table')),
            captions=len(soup.find_all('caption')),
            headers=len(headers),
            headers_with_scope=sum(1 for th in headers if th.has_attr('scope')),
        )

    @staticmethod
    def _aria_structure(soup: BeautifulSoup) -> AriaStructure:
        buttons = soup.find_all('button')
        images = soup.find_all('img')
        has_main_role = soup.find(
            lambda t: _attr_text(t, 'role') == 'main' or _attr_text(t, 'aria-label') == 'main'
        ) is not None
        return AriaStructure(
            buttons=len(buttons),
            buttons_with_aria_label=sum(1 for b in buttons if b.has_attr('aria-label')),
            images=len(images),
            images_with_alt=sum(1 for img in images if img.has_attr('alt')),
            has_main_role=has_main_role,
        )
