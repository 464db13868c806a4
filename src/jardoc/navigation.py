from dataclasses import dataclass

from jardoc.models import SourceDoc


@dataclass(frozen=True)
class NavigationLink:
    """A link to one component page."""
    title: str
    path: str


@dataclass(frozen=True)
class NavigationGroup:
    """Components sharing a group name."""
    group_name: str
    links: tuple[NavigationLink, ...] = ()

    def to_dict(self) -> dict:
        return {
            "groupName": self.group_name,
            "links": [{"title": link.title, "path": link.path} for link in self.links],
        }


def component_path(doc: SourceDoc, url_prefix: str = "") -> str:
    """Route path of a component page: the lower-cased class name, optionally prefixed."""
    path = doc.component_ref_name.lower()
    prefix = url_prefix.strip("/")
    return f"{prefix}/{path}" if prefix else path


def build_navigation_links(docs: tuple[SourceDoc, ...] | list[SourceDoc], url_prefix: str = "") -> list[NavigationGroup]:
    """Group documented components by group name.

    Groups appear in order of their first component; links keep the order of
    the docs.

    Args:
        docs: Documented components, in discovery order
        url_prefix: Optional prefix for every link path

    Returns:
        List of NavigationGroup
    """
    grouped: dict[str, list[NavigationLink]] = {}
    for doc in docs:
        link = NavigationLink(
            title=doc.component_doc_name or doc.component_ref_name,
            path=component_path(doc, url_prefix),
        )
        grouped.setdefault(doc.group_doc_name, []).append(link)

    return [NavigationGroup(group_name=name, links=tuple(links)) for name, links in grouped.items()]
