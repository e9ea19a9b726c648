"""Parsing of decoded "redraw" notifications into redraw events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from nvgrid.cursor import CursorMode, CursorShape
from nvgrid.events import (
    BusyStart,
    BusyStop,
    Clear,
    CommandLineBlockAppend,
    CommandLineBlockHide,
    CommandLineBlockShow,
    CommandLineHide,
    CommandLinePosition,
    CommandLineShow,
    CommandLineSpecialCharacter,
    CursorGoto,
    DefaultColorsSet,
    Destroy,
    EditorMode,
    Flush,
    GridLine,
    GridLineCell,
    GuiOption,
    GuiOptionKind,
    HighlightAttributesDefine,
    MessageClear,
    MessageHistoryShow,
    MessageKind,
    MessageRuler,
    MessageSetPosition,
    MessageShow,
    MessageShowCommand,
    MessageShowMode,
    ModeChange,
    ModeInfoSet,
    MouseOff,
    MouseOn,
    OptionSet,
    RedrawEvent,
    Resize,
    Scroll,
    SetTitle,
    StyledContent,
    WindowAnchor,
    WindowClose,
    WindowExternalPosition,
    WindowFloatPosition,
    WindowHide,
    WindowPosition,
    WindowViewport,
)
from nvgrid.style import Color, Colors, Style
from nvgrid.values import (
    ParseError,
    extract_values,
    parse_array,
    parse_bool,
    parse_f64,
    parse_i64,
    parse_map,
    parse_string,
    parse_u64,
)

logger = logging.getLogger(__name__)


def unpack_color(packed_color: int) -> Color:
    """An opaque colour from a packed 0xRRGGBB integer (low 32 bits are used)."""
    packed = packed_color & 0xFFFF_FFFF
    red = (packed & 0x00FF_0000) >> 16
    green = (packed & 0xFF00) >> 8
    blue = packed & 0xFF
    return Color(red / 255.0, green / 255.0, blue / 255.0, 1.0)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_COLOR_ATTRIBUTES = ("foreground", "background", "special")
_FLAG_ATTRIBUTES = ("reverse", "italic", "bold", "strikethrough", "underline", "undercurl")


def parse_style(style_map: Any) -> Style:
    """A highlight definition map; unknown or mistyped attributes are ignored."""
    style = Style(Colors(None, None, None))
    for name, value in parse_map(style_map):
        if not isinstance(name, str):
            logger.debug("Invalid attribute format")
            continue
        if name in _COLOR_ATTRIBUTES and _is_integer(value):
            setattr(style.colors, name, unpack_color(parse_u64(value)))
        elif name in _FLAG_ATTRIBUTES and isinstance(value, bool):
            setattr(style, name, value)
        elif name == "blend" and _is_integer(value):
            style.blend = parse_u64(value) & 0xFF
        else:
            logger.debug("Ignored style attribute: %s", name)
    return style


def parse_grid_line_cell(value: Any) -> GridLineCell:
    """One [text, highlight_id?, repeat?] cell of a grid_line event."""
    contents = parse_array(value)
    if not contents:
        raise ParseError("event", contents)
    highlight_id = parse_u64(contents[1]) if len(contents) > 1 else None
    repeat = parse_u64(contents[2]) if len(contents) > 2 else None
    return GridLineCell(text=parse_string(contents[0]), highlight_id=highlight_id, repeat=repeat)


def parse_styled_content(line: Any) -> StyledContent:
    """A list of [style_id, text] chunks."""
    content = []
    for chunk in parse_array(line):
        style_id, text = extract_values(parse_array(chunk), 2)
        content.append((parse_u64(style_id), parse_string(text)))
    return content


def _set_title(args: list[Any]) -> RedrawEvent:
    (title,) = extract_values(args, 1)
    return SetTitle(parse_string(title))


def _mode_info_set(args: list[Any]) -> RedrawEvent:
    _cursor_style_enabled, mode_info = extract_values(args, 2)
    cursor_modes = []
    for entry in parse_array(mode_info):
        mode = CursorMode()
        for name, value in parse_map(entry):
            key = parse_string(name)
            if key == "cursor_shape":
                mode.shape = CursorShape.from_type_name(parse_string(value))
            elif key == "cell_percentage":
                mode.cell_percentage = parse_u64(value) / 100.0
            elif key == "blinkwait":
                mode.blinkwait = parse_u64(value)
            elif key == "blinkon":
                mode.blinkon = parse_u64(value)
            elif key == "blinkoff":
                mode.blinkoff = parse_u64(value)
            elif key == "attr_id":
                mode.style_id = parse_u64(value)
        cursor_modes.append(mode)
    return ModeInfoSet(cursor_modes)


_OPTION_PARSERS: dict[GuiOptionKind, Callable[[Any], Any]] = {
    GuiOptionKind.ARABIC_SHAPE: parse_bool,
    GuiOptionKind.AMBI_WIDTH: parse_string,
    GuiOptionKind.EMOJI: parse_bool,
    GuiOptionKind.GUI_FONT: parse_string,
    GuiOptionKind.GUI_FONT_SET: parse_string,
    GuiOptionKind.GUI_FONT_WIDE: parse_string,
    GuiOptionKind.LINE_SPACE: parse_u64,
    GuiOptionKind.PUMBLEND: parse_u64,
    GuiOptionKind.SHOW_TAB_LINE: parse_u64,
    GuiOptionKind.TERM_GUI_COLORS: parse_bool,
}


def _option_set(args: list[Any]) -> RedrawEvent:
    name, value = extract_values(args, 2)
    option = GuiOption(parse_string(name), value)
    parser = _OPTION_PARSERS.get(option.kind)
    if parser is not None:
        option = GuiOption(option.name, parser(value))
    return OptionSet(option)


def _mode_change(args: list[Any]) -> RedrawEvent:
    mode, mode_index = extract_values(args, 2)
    return ModeChange(EditorMode(parse_string(mode)), parse_u64(mode_index))


def _grid_resize(args: list[Any]) -> RedrawEvent:
    grid, width, height = extract_values(args, 3)
    return Resize(parse_u64(grid), parse_u64(width), parse_u64(height))


def _default_colors_set(args: list[Any]) -> RedrawEvent:
    foreground, background, special, _term_fg, _term_bg = extract_values(args, 5)
    return DefaultColorsSet(
        Colors(
            foreground=unpack_color(parse_u64(foreground)),
            background=unpack_color(parse_u64(background)),
            special=unpack_color(parse_u64(special)),
        )
    )


def _hl_attr_define(args: list[Any]) -> RedrawEvent:
    highlight_id, attributes, _terminal_attributes, _info = extract_values(args, 4)
    style = parse_style(attributes)
    return HighlightAttributesDefine(parse_u64(highlight_id), style)


def _grid_line(args: list[Any]) -> RedrawEvent:
    grid, row, column_start, cells = extract_values(args, 4)
    return GridLine(
        parse_u64(grid),
        parse_u64(row),
        parse_u64(column_start),
        [parse_grid_line_cell(cell) for cell in parse_array(cells)],
    )


def _grid_clear(args: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(args, 1)
    return Clear(parse_u64(grid))


def _grid_destroy(args: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(args, 1)
    return Destroy(parse_u64(grid))


def _grid_cursor_goto(args: list[Any]) -> RedrawEvent:
    grid, row, column = extract_values(args, 3)
    return CursorGoto(parse_u64(grid), parse_u64(row), parse_u64(column))


def _grid_scroll(args: list[Any]) -> RedrawEvent:
    grid, top, bottom, left, right, rows, columns = extract_values(args, 7)
    return Scroll(
        parse_u64(grid),
        parse_u64(top),
        parse_u64(bottom),
        parse_u64(left),
        parse_u64(right),
        parse_i64(rows),
        parse_i64(columns),
    )


def _win_pos(args: list[Any]) -> RedrawEvent:
    grid, _window, start_row, start_column, width, height = extract_values(args, 6)
    return WindowPosition(
        parse_u64(grid),
        parse_u64(start_row),
        parse_u64(start_column),
        parse_u64(width),
        parse_u64(height),
    )


def _parse_window_anchor(value: Any) -> WindowAnchor:
    name = parse_string(value)
    try:
        return WindowAnchor(name)
    except ValueError:
        raise ParseError("window anchor", name) from None


def _win_float_pos(args: list[Any]) -> RedrawEvent:
    if len(args) == 8:
        grid, _window, anchor, anchor_grid, row, column, focusable, sort_order = args
        order: int | None = None
    else:
        grid, _window, anchor, anchor_grid, row, column, focusable = extract_values(args, 7)
        sort_order = None
    event = WindowFloatPosition(
        grid=parse_u64(grid),
        anchor=_parse_window_anchor(anchor),
        anchor_grid=parse_u64(anchor_grid),
        anchor_row=parse_f64(row),
        anchor_column=parse_f64(column),
        focusable=parse_bool(focusable),
        sort_order=None,
    )
    if len(args) == 8:
        order = parse_u64(sort_order)
        event = WindowFloatPosition(
            grid=event.grid,
            anchor=event.anchor,
            anchor_grid=event.anchor_grid,
            anchor_row=event.anchor_row,
            anchor_column=event.anchor_column,
            focusable=event.focusable,
            sort_order=order,
        )
    return event


def _win_external_pos(args: list[Any]) -> RedrawEvent:
    grid, _window = extract_values(args, 2)
    return WindowExternalPosition(parse_u64(grid))


def _win_hide(args: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(args, 1)
    return WindowHide(parse_u64(grid))


def _win_close(args: list[Any]) -> RedrawEvent:
    (grid,) = extract_values(args, 1)
    return WindowClose(parse_u64(grid))


def _msg_set_pos(args: list[Any]) -> RedrawEvent:
    grid, row, scrolled, separator = extract_values(args, 4)
    return MessageSetPosition(
        parse_u64(grid), parse_u64(row), parse_bool(scrolled), parse_string(separator)
    )


def _win_viewport(args: list[Any]) -> RedrawEvent:
    grid, _window, top_line, bottom_line, current_line, current_column = extract_values(args, 6)
    return WindowViewport(
        parse_u64(grid),
        parse_f64(top_line),
        parse_f64(bottom_line),
        parse_f64(current_line),
        parse_f64(current_column),
    )


def _cmdline_show(args: list[Any]) -> RedrawEvent:
    content, position, first_character, prompt, indent, level = extract_values(args, 6)
    return CommandLineShow(
        parse_styled_content(content),
        parse_u64(position),
        parse_string(first_character),
        parse_string(prompt),
        parse_u64(indent),
        parse_u64(level),
    )


def _cmdline_pos(args: list[Any]) -> RedrawEvent:
    position, level = extract_values(args, 2)
    return CommandLinePosition(parse_u64(position), parse_u64(level))


def _cmdline_special_char(args: list[Any]) -> RedrawEvent:
    character, shift, level = extract_values(args, 3)
    return CommandLineSpecialCharacter(parse_string(character), parse_bool(shift), parse_u64(level))


def _cmdline_block_show(args: list[Any]) -> RedrawEvent:
    (lines,) = extract_values(args, 1)
    return CommandLineBlockShow([parse_styled_content(line) for line in parse_array(lines)])


def _cmdline_block_append(args: list[Any]) -> RedrawEvent:
    (line,) = extract_values(args, 1)
    return CommandLineBlockAppend(parse_styled_content(line))


def _msg_show(args: list[Any]) -> RedrawEvent:
    kind, content, replace_last = extract_values(args, 3)
    return MessageShow(
        MessageKind.parse(parse_string(kind)),
        parse_styled_content(content),
        parse_bool(replace_last),
    )


def _msg_showmode(args: list[Any]) -> RedrawEvent:
    (content,) = extract_values(args, 1)
    return MessageShowMode(parse_styled_content(content))


def _msg_showcmd(args: list[Any]) -> RedrawEvent:
    (content,) = extract_values(args, 1)
    return MessageShowCommand(parse_styled_content(content))


def _msg_ruler(args: list[Any]) -> RedrawEvent:
    (content,) = extract_values(args, 1)
    return MessageRuler(parse_styled_content(content))


def _msg_history_entry(entry: Any) -> tuple[MessageKind, StyledContent]:
    kind, content = extract_values(parse_array(entry), 2)
    return MessageKind.parse(parse_string(kind)), parse_styled_content(content)


def _msg_history_show(args: list[Any]) -> RedrawEvent:
    (entries,) = extract_values(args, 1)
    return MessageHistoryShow([_msg_history_entry(entry) for entry in parse_array(entries)])


_PARSERS: dict[str, Callable[[list[Any]], RedrawEvent]] = {
    "set_title": _set_title,
    "mode_info_set": _mode_info_set,
    "option_set": _option_set,
    "mode_change": _mode_change,
    "mouse_on": lambda _args: MouseOn(),
    "mouse_off": lambda _args: MouseOff(),
    "busy_start": lambda _args: BusyStart(),
    "busy_stop": lambda _args: BusyStop(),
    "flush": lambda _args: Flush(),
    "grid_resize": _grid_resize,
    "default_colors_set": _default_colors_set,
    "hl_attr_define": _hl_attr_define,
    "grid_line": _grid_line,
    "grid_clear": _grid_clear,
    "grid_destroy": _grid_destroy,
    "grid_cursor_goto": _grid_cursor_goto,
    "grid_scroll": _grid_scroll,
    "win_pos": _win_pos,
    "win_float_pos": _win_float_pos,
    "win_external_pos": _win_external_pos,
    "win_hide": _win_hide,
    "win_close": _win_close,
    "msg_set_pos": _msg_set_pos,
    "win_viewport": _win_viewport,
    "cmdline_show": _cmdline_show,
    "cmdline_pos": _cmdline_pos,
    "cmdline_special_char": _cmdline_special_char,
    "cmdline_hide": lambda _args: CommandLineHide(),
    "cmdline_block_show": _cmdline_block_show,
    "cmdline_block_append": _cmdline_block_append,
    "cmdline_block_hide": lambda _args: CommandLineBlockHide(),
    "msg_show": _msg_show,
    "msg_clear": lambda _args: MessageClear(),
    "msg_showmode": _msg_showmode,
    "msg_showcmd": _msg_showcmd,
    "msg_ruler": _msg_ruler,
    "msg_history_show": _msg_history_show,
}


def parse_redraw_event(event_value: Any) -> list[RedrawEvent]:
    """All events of one [name, args...] batch; unknown names give no events."""
    contents = parse_array(event_value)
    if not contents:
        raise ParseError("event", contents)
    name = parse_string(contents[0])
    parser = _PARSERS.get(name)
    events = []
    for event in contents[1:]:
        parameters = parse_array(event)
        if parser is not None:
            events.append(parser(parameters))
    return events