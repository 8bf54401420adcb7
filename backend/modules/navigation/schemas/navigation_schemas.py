from pydantic import BaseModel
from typing import List, Optional

from ..descriptors import InterfaceKind, NavigationDescriptor


class SubmenuItemOut(BaseModel):
    label: str
    to: str
    path: str


class NavSectionOut(BaseModel):
    label: str
    path: str
    active: bool = False
    submenu: List[SubmenuItemOut] = []


class NavigationOut(BaseModel):
    kind: InterfaceKind
    title: str
    sections: List[NavSectionOut]

    @classmethod
    def from_descriptor(cls, descriptor: NavigationDescriptor, current_path: Optional[str] = None):
        active = descriptor.active_section(current_path) if current_path else None
        return cls(
            kind=descriptor.kind,
            title=descriptor.title,
            sections=[
                NavSectionOut(
                    label=section.label,
                    path=section.path,
                    active=section is active,
                    submenu=[
                        SubmenuItemOut(label=item.label, to=item.to, path=section.submenu_path(item))
                        for item in section.submenu
                    ],
                )
                for section in descriptor.sections
            ],
        )
