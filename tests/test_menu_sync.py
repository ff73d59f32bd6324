import pytest

from menu_model import MenuStructureError, cascade, check, command, numbered
from menu_sync import MenuSynchronizer


def make_definitions(state, counter):
    def track_menu():
        counter['track'] += 1
        return numbered(*[command(f'Track {i}', '', f'set aid {i}') for i in range(1, state['tracks'] + 1)])

    return {
        'context_menu': numbered(
            check(lambda: 'Un-mute' if state['mute'] else 'Mute', '', 'cycle mute',
                  state=lambda: state['mute']),
            cascade('Tracks', 'track_menu'),
        ),
        'track_menu': track_menu,
    }


@pytest.fixture
def state():
    return {'mute': False, 'tracks': 2}


@pytest.fixture
def counter():
    return {'track': 0}


@pytest.fixture
def sync():
    return MenuSynchronizer({'mute': 'context_menu', 'aid': 'track_menu',
                             'track-list/count': ['track_menu']})


class TestReconcile:
    def test_install_marks_everything_dirty(self, sync, state, counter):
        sync.install(make_definitions(state, counter), file_loaded=True)
        assert {'context_menu', 'track_menu'} <= sync.dirty

    def test_first_reconcile_generates_and_resolves(self, sync, state, counter):
        menu_set = sync.install(make_definitions(state, counter), file_loaded=True)
        menu_set = sync.reconcile(menu_set)
        assert counter['track'] == 1
        assert len(menu_set.menus['track_menu']) == 2
        assert menu_set.menus['context_menu'][1].resolved.label == 'Mute'
        assert sync.dirty == set()

    def test_idempotent_without_changes(self, sync, state, counter):
        menu_set = sync.reconcile(sync.install(make_definitions(state, counter), True))
        again = sync.reconcile(menu_set)
        assert again is menu_set
        assert counter['track'] == 1

    def test_property_change_rebuilds_only_watched_menu(self, sync, host, state, counter):
        sync.attach(host)
        menu_set = sync.reconcile(sync.install(make_definitions(state, counter), True))

        state['tracks'] = 3
        host.set_property('aid', 2)
        assert sync.dirty == {'track_menu'}

        menu_set = sync.reconcile(menu_set)
        assert counter['track'] == 2
        assert len(menu_set.menus['track_menu']) == 3
        # Base menu fields untouched since it was not stale.
        assert menu_set.menus['context_menu'][1].resolved.label == 'Mute'

    def test_base_menu_change_reevaluates_fields(self, sync, host, state, counter):
        sync.attach(host)
        menu_set = sync.reconcile(sync.install(make_definitions(state, counter), True))

        state['mute'] = True
        host.set_property('mute', True)
        menu_set = sync.reconcile(menu_set)
        item = menu_set.menus['context_menu'][1]
        assert item.resolved.label == 'Un-mute'
        assert item.resolved.state is True
        assert counter['track'] == 1

    def test_unwatched_property_is_ignored(self, sync, host):
        sync.attach(host)
        sync.on_property_change('volume', 50)
        assert sync.dirty == set()

    def test_list_of_menus_for_one_property(self, sync):
        sync.on_property_change('track-list/count', 4)
        assert sync.dirty == {'track_menu'}


class TestFailures:
    def test_static_gap_rejected_at_install(self, sync):
        with pytest.raises(MenuStructureError):
            sync.install({'context_menu': {1: command('a'), 3: command('b')}}, False)

    def test_generator_gap_commits_nothing(self, sync, state, counter):
        menu_set = sync.reconcile(sync.install(make_definitions(state, counter), True))
        sync.generators['track_menu'] = lambda: {2: command('x')}
        sync.mark_dirty('track_menu', 'context_menu')

        with pytest.raises(MenuStructureError):
            sync.reconcile(menu_set)
        assert {'track_menu', 'context_menu'} <= sync.dirty
        assert len(menu_set.menus['track_menu']) == 2

    def test_missing_base_menu(self):
        sync = MenuSynchronizer({})
        menu_set = sync.install({'other': numbered(command('a'))}, False)
        with pytest.raises(MenuStructureError):
            sync.reconcile(menu_set)
