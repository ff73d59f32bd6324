from flatpak_check import host_prefix, is_sandboxed


def test_flatpak_id_means_sandboxed():
    assert is_sandboxed(['HOME=/home/u', 'FLATPAK_ID=io.mpv.Mpv']) is True


def test_plain_environment_is_not_sandboxed():
    assert is_sandboxed(['HOME=/home/u', 'PATH=/usr/bin']) is False
    assert is_sandboxed([]) is False


def test_interactive_shell_overrides_marker():
    assert is_sandboxed(['FLATPAK_ID=io.mpv.Mpv', 'PS1=$ ']) is False
    assert is_sandboxed(['PS1=$ ', 'FLATPAK_ID=io.mpv.Mpv']) is False


def test_host_prefix():
    assert host_prefix(True) == ['flatpak-spawn', '--host']
    assert host_prefix(False) == []


def test_minimal_marker_lists():
    assert is_sandboxed(['FLATPAK_ID=x']) is True
    assert is_sandboxed(['FLATPAK_ID=x', 'PS1=y']) is False
