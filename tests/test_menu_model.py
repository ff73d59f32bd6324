import pytest

from menu_model import (ItemKind, MenuItem, MenuStructureError, ab_toggle, cascade, check,
                        command, item_to_wire, menu_to_wire, numbered, radio, separator,
                        validate_menu)


class TestMenuItem:
    def test_cascade_requires_submenu(self):
        with pytest.raises(MenuStructureError):
            MenuItem(ItemKind.CASCADE, label='Open')

    def test_only_cascade_has_submenu(self):
        with pytest.raises(MenuStructureError):
            MenuItem(ItemKind.COMMAND, label='x', submenu='open_menu')

    def test_separator_cannot_carry_command(self):
        with pytest.raises(MenuStructureError):
            MenuItem(ItemKind.SEPARATOR, command='quit')

    def test_invalid_ab_state(self):
        with pytest.raises(MenuStructureError):
            ab_toggle('A-B', state='c')

    def test_selectable(self):
        assert command('Quit', '', 'quit').selectable
        assert check('Mute').selectable
        assert not separator().selectable
        assert not cascade('Open', 'open_menu').selectable

    def test_evaluate_keeps_callables(self):
        calls = []

        def label():
            calls.append(1)
            return 'Mute'

        item = check(label, '', 'cycle mute', state=lambda: True)
        res = item.evaluate()
        assert res.label == 'Mute'
        assert res.state is True
        assert callable(item.label)
        assert item.resolved is None
        assert calls == [1]


class TestValidateMenu:
    def test_contiguous_menu_passes(self):
        validate_menu('m', numbered(command('a'), separator(), command('b')))

    def test_gap_is_reported(self):
        menu = {1: command('a'), 3: command('c')}
        with pytest.raises(MenuStructureError) as exc:
            validate_menu('play_menu', menu)
        assert 'Menu "play_menu" with property/index "2" is undefined' in str(exc.value)

    def test_not_a_mapping(self):
        with pytest.raises(MenuStructureError):
            validate_menu('m', [command('a')])


class TestWire:
    def test_separator(self):
        assert item_to_wire(separator()) == {'itemType': 'separator'}

    def test_cascade_uses_accelerator_for_submenu(self):
        out = item_to_wire(cascade('Open', 'open_menu'))
        assert out['itemType'] == 'cascade'
        assert out['label'] == 'Open'
        assert out['accelerator'] == 'open_menu'
        assert 'itemState' not in out
        assert out['itemDisable'] is False

    def test_static_command(self):
        out = item_to_wire(command('Stop', 'Ctrl+Space', 'stop', repost=True))
        assert out == {
            'itemType': 'command',
            'label': 'Stop',
            'accelerator': 'Ctrl+Space',
            'command': 'stop',
            'itemState': False,
            'itemDisable': False,
            'repostMenu': True,
        }

    def test_callback_command_is_not_serialized(self):
        out = item_to_wire(command('Move Up', '', lambda: None))
        assert 'command' not in out

    def test_computed_fields_use_val_keys(self):
        item = radio(lambda: 'Label', '', 'x', state=lambda: True, disabled=lambda: True)
        item.resolved = item.evaluate()
        out = item_to_wire(item)
        assert out['labelVal'] == 'Label'
        assert out['itemStateVal'] is True
        assert out['itemDisableVal'] is True
        assert 'label' not in out

    def test_menu_keys_are_strings_in_order(self):
        menu = numbered(command('a'), command('b'), command('c'))
        assert list(menu_to_wire(menu)) == ['1', '2', '3']
