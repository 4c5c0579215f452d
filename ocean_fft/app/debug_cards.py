# -*- coding: utf-8 -*-

"""
Filename: debug_cards.py
Author: storro
Date: 2026-02-11
Description: Debug card visualization of the published ocean textures + hotkeys.
"""

from direct.gui.OnscreenText import OnscreenText
from panda3d.core import CardMaker, NodePath, Texture, TextNode, TransparencyAttrib

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from ocean_fft.app.ocean_app import OceanApp


def attach_texture_debug_card(
    app: "OceanApp",
    tex: Texture,
    gain: float = 1.0,
    pos: tuple[float, float] = (0.03, 0.06),
    size: tuple[float, float] = (0.5, 0.5),
) -> NodePath:
    """
    Attach a card to the bottom right of aspect2d that displays the given texture
    """
    cm = CardMaker("tex_debug")
    width, height = size
    margin_x, margin_y = pos
    cm.set_frame(-margin_x - width, -margin_x, margin_y, margin_y + height)

    card = NodePath(cm.generate())
    card.reparent_to(app.a2dBottomRight)
    card.set_texture(tex)
    card.set_color_scale(gain, gain, gain, 1.0)

    card.set_bin("fixed", 100)
    card.set_depth_test(False)
    card.set_depth_write(False)
    card.set_transparency(TransparencyAttrib.M_none)
    return card


class DebugCardController:
    def __init__(
        self,
        app: "OceanApp",
        displacement_tex: Texture,
        normal_tex: Texture,
    ) -> None:
        self._app = app
        self._displacement_tex = displacement_tex
        self._normal_tex = normal_tex

        self._debug_mode = 0
        self._debug_visible = False

        self._debug_card = attach_texture_debug_card(self._app, displacement_tex, gain=0.5)

        debug_margin_x, debug_margin_y = (0.03, 0.06)
        debug_width, debug_height = (0.5, 0.5)
        debug_label_offset = 0.02

        self._debug_label = OnscreenText(
            text="Displacement",
            parent=self._app.a2dBottomRight,
            pos=(-debug_margin_x - debug_width, debug_margin_y + debug_height + debug_label_offset),
            align=TextNode.A_left,
            scale=0.05,
            fg=(1, 1, 1, 1),
            shadow=(0, 0, 0, 1),
            mayChange=True,
        )
        self._debug_label.hide()
        self._debug_card.hide()

        self._app.accept("d", self.cycle)
        self._app.accept("c", self.toggle)

        self._create_help_text()

    def _create_help_text(self) -> None:
        help_text = (
            "c: show/hide debug card\n"
            "d: cycle debug view\n"
            "arrow up/down: wind speed\n"
            "arrow left/right: rotate wind\n"
            "+ or =/-: amplitude\n"
            "[/]: choppiness\n"
            ",/.: time scale, space: pause\n"
            "1: calm sea, 2: stormy sea"
        )
        OnscreenText(
            text=help_text,
            parent=self._app.a2dTopLeft,
            pos=(0.03, -0.06),
            align=TextNode.A_left,
            scale=0.05,
            fg=(1, 1, 1, 1),
            shadow=(0, 0, 0, 1),
            mayChange=False,
        )

    def toggle(self) -> None:
        self._debug_visible = not self._debug_visible
        if self._debug_visible:
            self._debug_card.show()
            self._debug_label.show()
        else:
            self._debug_card.hide()
            self._debug_label.hide()

    def cycle(self) -> None:
        if not self._debug_visible:
            return

        # 0: displacement, 1: normal map
        self._debug_mode = (self._debug_mode + 1) % 2

        if self._debug_mode == 0:
            self._debug_card.set_texture(self._displacement_tex, 1)
            self._debug_card.set_color_scale(0.5, 0.5, 0.5, 1.0)
            self._debug_label.setText("Displacement")
        else:
            self._debug_card.set_texture(self._normal_tex, 1)
            self._debug_card.set_color_scale(1.0, 1.0, 1.0, 1.0)
            self._debug_label.setText("Normal map")
