"""
Copyright 2024 Nomios UK&I

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import typing as t
from dataclasses import dataclass, field

from lxml import etree
from ncclient.xml_ import new_ele, sub_ele, to_ele

from .params import Params


# holds a markup fragment which may have several top level nodes
_FRAGMENT_TAG = "fragment"


def _append_markup(ele: etree._Element, markup: str) -> None:
    """
    Parse an XML fragment and append its nodes to an element.

    Args:
        ele (etree._Element): The element receiving the fragment.
        markup (str): The XML fragment.

    Raises:
        lxml.etree.XMLSyntaxError: when the fragment is not well-formed.
    """
    fragment = to_ele(f"<{_FRAGMENT_TAG}>{markup}</{_FRAGMENT_TAG}>")
    if fragment.text:
        if len(ele):
            ele[-1].tail = (ele[-1].tail or "") + fragment.text
        else:
            ele.text = (ele.text or "") + fragment.text
    ele.extend(list(fragment))


@dataclass
class RpcElement:
    """
    A single XML element of an RPC body.

    `text` is character data and is always escaped on output, `markup` is an
    XML fragment attached as parsed nodes.
    """

    tag: str
    attributes: Params = field(default_factory=Params)
    text: str = ""
    markup: str = ""
    children: t.List["RpcElement"] = field(default_factory=list)

    def append(self, child: "RpcElement") -> "RpcElement":
        """
        Append a child element.

        Args:
            child (RpcElement): The child to append.

        Returns:
            RpcElement: The appended child.
        """
        self.children.append(child)
        return child

    def to_ele(self, parent: t.Optional[etree._Element] = None) -> etree._Element:
        """
        Build the lxml element, as a sub element of parent when given.

        Args:
            parent (t.Optional[etree._Element]): The parent element.

        Returns:
            etree._Element: The built element.
        """
        ele = new_ele(self.tag) if parent is None else sub_ele(parent, self.tag)

        # set one by one to keep attribute order
        for name, value in self.attributes:
            ele.set(name, value)

        # empty text would serialize as an open/close pair
        if self.text:
            ele.text = self.text
        if self.markup:
            _append_markup(ele, self.markup)
        for child in self.children:
            child.to_ele(ele)

        return ele

    def render(self) -> str:
        """
        Serialize the element without an XML declaration.

        Returns:
            str: The serialized element.
        """
        return etree.tostring(self.to_ele(), encoding="unicode")
