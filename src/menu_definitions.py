"""The context menu layout for mpv.

Two variants exist: a small one shown while nothing is loaded, and the full
one installed on `file-loaded`. Menus whose contents depend on the loaded
media (editions, chapters, tracks, channel layouts) are generators.
"""

from __future__ import annotations

from menu_model import ab_toggle, cascade, check, command, numbered, radio, separator
from services.langcodes import language_name


BASE_MENU = 'context_menu'

# Property -> menu(s) to rebuild when it changes.
REBUILD_WATCH = {
    # Menus that can be independently rebuilt
    'vid': 'vidtrack_menu',
    'aid': 'audtrack_menu',
    'audio-channels': 'channel_layout',
    'sid': 'subtrack_menu',
    'sub-visibility': 'subtrack_menu',
    'track-list/count': ['vidtrack_menu', 'audtrack_menu', 'subtrack_menu'],
    'chapter-list': 'chapter_menu',
    'chapter': 'chapter_menu',
    'edition-list': 'edition_menu',
    'current-edition': 'edition_menu',

    # Base menu rebuild
    'video-aspect-override': BASE_MENU,
    'video-rotate': BASE_MENU,
    'video-align-x': BASE_MENU,
    'video-align-y': BASE_MENU,
    'deinterlace': BASE_MENU,
    'vf': BASE_MENU,
    'mute': BASE_MENU,
    'sub-align-y': BASE_MENU,
    'image-subs-video-resolution': BASE_MENU,
    'ab-loop-a': BASE_MENU,
    'ab-loop-b': BASE_MENU,
    'loop-file': BASE_MENU,
    'shuffle': BASE_MENU,
    'loop-playlist': BASE_MENU,
    'playlist-count': BASE_MENU,
    'ontop': BASE_MENU,
    'border': BASE_MENU,
}

# Based on "mpv --audio-channels=help", reordered/renamed in part as per Bomi.
AUDIO_CHANNELS = (
    ('Auto', 'auto'), ('Auto (Safe)', 'auto-safe'), ('Empty', 'empty'), ('Mono', 'mono'),
    ('Stereo', 'stereo'), ('2.1ch', '2.1'), ('3.0ch', '3.0'), ('3.0ch (Back)', '3.0(back)'),
    ('3.1ch', '3.1'), ('3.1ch (Back)', '3.1(back)'), ('4.0ch', 'quad'),
    ('4.0ch (Side)', 'quad(side)'), ('4.0ch (Diamond)', '4.0'), ('4.1ch', '4.1(alsa)'),
    ('4.1ch (Diamond)', '4.1'), ('5.0ch', '5.0(alsa)'), ('5.0ch (Alt.)', '5.0'),
    ('5.0ch (Side)', '5.0(side)'), ('5.1ch', '5.1(alsa)'), ('5.1ch (Alt.)', '5.1'),
    ('5.1ch (Side)', '5.1(side)'), ('6.0ch', '6.0'), ('6.0ch (Front)', '6.0(front)'),
    ('6.0ch (Hexagonal)', 'hexagonal'), ('6.1ch', '6.1'), ('6.1ch (Top)', '6.1(top)'),
    ('6.1ch (Back)', '6.1(back)'), ('6.1ch (Front)', '6.1(front)'), ('7.0ch', '7.0'),
    ('7.0ch (Back)', '7.0(rear)'), ('7.0ch (Front)', '7.0(front)'), ('7.1ch', '7.1(alsa)'),
    ('7.1ch (Alt.)', '7.1'), ('7.1ch (Wide)', '7.1(wide)'), ('7.1ch (Side)', '7.1(wide-side)'),
    ('7.1ch (Back)', '7.1(rear)'), ('8.0ch (Octagonal)', 'octagonal'),
)

ASPECT_RATIOS = {
    '4:3': 4 / 3,
    '16:10': 16 / 10,
    '16:9': 16 / 9,
    '1.85:1': 1.85,
    '2.35:1': 2.35,
}


def _num(value) -> str:
    return f'{value:g}'


class MenuDefinitions:
    def __init__(self, host, options):
        self.host = host
        self.opt = options

    def prop(self, name, default=None):
        value = self.host.get_property(name)
        return default if value is None else value

    # --- State predicates ---

    def state_ab_loop(self) -> str:
        a = self.prop('ab-loop-a', 'no')
        b = self.prop('ab-loop-b', 'no')
        if a == 'no' and b == 'no':
            return 'off'
        if a != 'no' and b == 'no':
            return 'a'
        if a != 'no' and b != 'no':
            return 'b'
        return 'off'

    def state_file_loop(self) -> bool:
        return self.prop('loop-file') == 'inf'

    def state_ratio(self, ratio: str) -> bool:
        current = self.prop('video-aspect-override')
        try:
            current = round(float(current), 3)
        except (TypeError, ValueError):
            return False
        return current == round(ASPECT_RATIOS[ratio], 3)

    def state_rotate(self, angle: int) -> bool:
        return self.prop('video-rotate') == angle

    def state_align(self, axis: str, pos: float) -> bool:
        return self.prop(f'video-align-{axis}') == pos

    def state_deinterlace(self, value: bool) -> bool:
        return self.prop('deinterlace') == value

    def state_flip(self, name: str) -> bool:
        for f in self.prop('vf', []) or []:
            if isinstance(f, dict) and f.get('name') == name and f.get('enabled') is True:
                return True
        return False

    def mute_label(self) -> str:
        return 'Un-mute' if self.prop('mute') else 'Mute'

    def sub_visibility_label(self) -> str:
        return 'Hide' if self.prop('sub-visibility') else 'Un-hide'

    def state_audio_channels(self, layout: str) -> bool:
        return self.prop('audio-channels') == layout

    def state_sub_align(self, value: str) -> bool:
        return self.prop('sub-align-y') == value

    def state_sub_pos(self, value: bool) -> bool:
        return self.prop('image-subs-video-resolution') == value

    def state_playlist_loop(self) -> bool:
        return str(self.prop('loop-playlist', False)).lower() not in ('false', 'no')

    def state_on_top(self, value: bool) -> bool:
        return self.prop('ontop') == value

    def track_disabled(self, prop: str) -> bool:
        # vid/aid/sid read back as False when set to "no".
        return self.prop(prop) is False

    def playlist_too_short(self) -> bool:
        return int(self.prop('playlist-count', 0)) < 2

    # --- Actions ---

    def move_playlist(self, direction: str):
        pos = int(self.prop('playlist-pos', 0))
        last = int(self.prop('playlist-count', 0)) - 1
        if direction == 'up':
            if pos != 0:
                self.host.commandv('playlist-move', pos, pos - 1)
            else:
                self.host.osd_message("Can't move item up any further")
        elif direction == 'down':
            if pos != last:
                # playlist-move puts the entry before the target index.
                self.host.commandv('playlist-move', pos, pos + 2)
            else:
                self.host.osd_message("Can't move item down any further")

    # --- Generated menus ---

    def tracks(self, track_type: str) -> list:
        return [t for t in (self.prop('track-list', []) or [])
                if isinstance(t, dict) and t.get('type') == track_type]

    def track_title(self, track: dict, fallback: str) -> str:
        title = track.get('title')
        lang = track.get('lang')
        if lang:
            lang = language_name(lang) or lang
        if title:
            return f'{title} ({lang})' if lang else title
        if lang:
            return lang
        return fallback

    def has_no_editions(self) -> bool:
        return len(self.prop('edition-list', []) or []) < 1

    def has_no_chapters(self) -> bool:
        return len(self.prop('chapter-list', []) or []) < 1

    def has_no_video_tracks(self) -> bool:
        return len(self.tracks('video')) < 1

    def edition_menu(self):
        editions = self.prop('edition-list', []) or []
        if not editions:
            return numbered(command('No Editions', disabled=True))
        current = self.prop('current-edition')
        items = []
        for num, edition in enumerate(editions):
            title = (edition.get('title') if isinstance(edition, dict) else None) or f'Edition {num + 1}'
            items.append(radio(title, '', f'set edition {num}', state=(num == current), repost=True))
        return numbered(*items)

    def chapter_menu(self):
        items = [
            command('Previous', 'PgUp', 'no-osd add chapter -1', repost=True),
            command('Next', 'PgDown', 'no-osd add chapter 1', repost=True),
            separator(),
        ]
        current = self.prop('chapter')
        for num, chapter in enumerate(self.prop('chapter-list', []) or []):
            title = (chapter.get('title') if isinstance(chapter, dict) else None) or f'Chapter {num + 1}'
            items.append(radio(title, '', f'set chapter {num}', state=(num == current), repost=True))
        return numbered(*items)

    def vidtrack_menu(self):
        tracks = self.tracks('video')
        if not tracks:
            return numbered(radio('No Video Tracks', disabled=True))
        items = []
        for i, track in enumerate(tracks, start=1):
            title = track.get('title') or f'Video Track {i}'
            items.append(radio(title, '', f"set vid {track.get('id')}",
                               state=bool(track.get('selected')), repost=True))
        return numbered(*items)

    def _track_menu(self, track_type: str, prop: str, fallback: str, head: list):
        items = list(head)
        for i, track in enumerate(self.tracks(track_type), start=1):
            if i == 1:
                items += [
                    separator(),
                    radio('Select None', '', f'set {prop} 0',
                          state=lambda: self.track_disabled(prop), repost=True),
                    separator(),
                ]
            items.append(radio(self.track_title(track, f'{fallback} {i}'), '',
                               f"set {prop} {track.get('id')}",
                               state=bool(track.get('selected')), repost=True))
        return numbered(*items)

    def audtrack_menu(self):
        return self._track_menu('audio', 'aid', 'Audio Track', [
            command('Open File', '', 'script-message add_audio_dialog'),
            command('Reload File', '', 'audio-reload'),
            command('Remove', '', 'audio-remove'),
            separator(),
            command('Select Next', 'Ctrl+A', 'cycle audio', repost=True),
        ])

    def subtrack_menu(self):
        return self._track_menu('sub', 'sid', 'Subtitle Track', [
            command('Open File', '(Shift+F)', 'script-message add_subtitle_dialog'),
            command('Reload File', '', 'sub-reload'),
            command('Clear File', '', 'sub-remove'),
            separator(),
            command('Select Next', 'Shift+N', 'cycle sub', repost=True),
            command('Select Previous', 'Ctrl+Shift+N', 'cycle sub down', repost=True),
            check(self.sub_visibility_label, 'V', 'cycle sub-visibility',
                  state=lambda: not self.prop('sub-visibility'), repost=True),
        ])

    def channel_layout(self):
        items = []
        for i, (label, layout) in enumerate(AUDIO_CHANNELS):
            if i == 2:
                items.append(separator())
            items.append(radio(label, '', f'set audio-channels "{layout}"',
                               state=self.state_audio_channels(layout), repost=True))
        return numbered(*items)

    # --- Menu sets ---

    def open_menu(self):
        return numbered(
            command('File', 'Ctrl+F', 'script-message add_files_dialog'),
            command('Folder', 'Ctrl+G', 'script-message add_folder_dialog'),
            command('URL', '', 'script-message open_url_dialog'),
        )

    def window_menus(self) -> dict:
        return {
            'window_menu': numbered(
                cascade('Stays on Top', 'staysontop_menu'),
                check('Remove Frame', '', 'cycle border', state=lambda: not self.prop('border', True), repost=True),
                separator(),
                command('Toggle Fullscreen', 'F', 'cycle fullscreen', repost=True),
                command('Enter Fullscreen', '', 'set fullscreen "yes"', repost=True),
                command('Exit Fullscreen', 'Escape', 'set fullscreen "no"', repost=True),
                separator(),
                command('Close', 'Ctrl+W', 'quit'),
            ),
            'staysontop_menu': numbered(
                command('Select Next', '', 'cycle ontop', repost=True),
                separator(),
                radio('Off', '', 'set ontop "no"', state=lambda: self.state_on_top(False), repost=True),
                radio('On', '', 'set ontop "yes"', state=lambda: self.state_on_top(True), repost=True),
            ),
        }

    def no_file_menus(self) -> dict:
        """Shown while nothing is loaded."""
        menus = {
            BASE_MENU: numbered(
                cascade('Open', 'open_menu'),
                separator(),
                cascade('Window', 'window_menu'),
                separator(),
                command('Dismiss Menu', '', 'ignore'),
                command('Quit', '', 'quit'),
            ),
            'open_menu': self.open_menu(),
        }
        menus.update(self.window_menus())
        return menus

    def file_loaded_menus(self) -> dict:
        o = self.opt
        menus = {
            BASE_MENU: numbered(
                cascade('Open', 'open_menu'),
                separator(),
                cascade('Play', 'play_menu'),
                cascade('Video', 'video_menu'),
                cascade('Audio', 'audio_menu'),
                cascade('Subtitle', 'subtitle_menu'),
                separator(),
                cascade('Tools', 'tools_menu'),
                cascade('Window', 'window_menu'),
                separator(),
                command('Dismiss Menu', '', 'ignore'),
                command('Quit', '', 'quit'),
            ),

            'open_menu': self.open_menu(),

            'play_menu': numbered(
                command('Play/Pause', 'Space', 'cycle pause', repost=True),
                command('Stop', 'Ctrl+Space', 'stop'),
                separator(),
                command('Previous', '<', 'playlist-prev', repost=True),
                command('Next', '>', 'playlist-next', repost=True),
                separator(),
                cascade('Speed', 'speed_menu'),
                cascade('A-B Repeat', 'abrepeat_menu'),
                separator(),
                cascade('Seek', 'seek_menu'),
                cascade('Title/Edition', 'edition_menu', disabled=self.has_no_editions),
                cascade('Chapter', 'chapter_menu', disabled=self.has_no_chapters),
            ),

            'speed_menu': numbered(
                command('Reset', 'Backspace', 'no-osd set speed 1.0 ; show-text "Play Speed - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.play_speed)}%', '=', f'multiply speed {_num(1 + o.play_speed / 100)}', repost=True),
                command(f'-{_num(o.play_speed)}%', '-', f'multiply speed {_num(1 - o.play_speed / 100)}', repost=True),
            ),

            'abrepeat_menu': numbered(
                ab_toggle('Set/Clear A-B Loop', 'R', 'ab-loop', state=self.state_ab_loop, repost=True),
                check('Toggle Infinite Loop', '', 'cycle-values loop-file "inf" "no"',
                      state=self.state_file_loop, repost=True),
            ),

            'seek_menu': numbered(
                command('Beginning', 'Ctrl+Home', 'no-osd seek 0 absolute', repost=True),
                separator(),
                command(f'+{_num(o.seek_small)} Sec', 'Right', f'no-osd seek {_num(o.seek_small)}', repost=True),
                command(f'-{_num(o.seek_small)} Sec', 'Left', f'no-osd seek -{_num(o.seek_small)}', repost=True),
                command(f'+{_num(o.seek_medium)} Sec', 'Up', f'no-osd seek {_num(o.seek_medium)}', repost=True),
                command(f'-{_num(o.seek_medium)} Sec', 'Down', f'no-osd seek -{_num(o.seek_medium)}', repost=True),
                command(f'+{_num(o.seek_large)} Sec', 'End', f'no-osd seek {_num(o.seek_large)}', repost=True),
                command(f'-{_num(o.seek_large)} Sec', 'Home', f'no-osd seek -{_num(o.seek_large)}', repost=True),
                separator(),
                command('Previous Frame', 'Alt+Left', 'frame-back-step', repost=True),
                command('Next Frame', 'Alt+Right', 'frame-step', repost=True),
                command('Next Black Frame', 'Alt+b', 'script-binding skip_scene', repost=True),
                separator(),
                command('Previous Subtitle', '', 'no-osd sub-seek -1', repost=True),
                command('Current Subtitle', '', 'no-osd sub-seek 0', repost=True),
                command('Next Subtitle', '', 'no-osd sub-seek 1', repost=True),
            ),

            'edition_menu': self.edition_menu,
            'chapter_menu': self.chapter_menu,

            'video_menu': numbered(
                cascade('Track', 'vidtrack_menu', disabled=self.has_no_video_tracks),
                separator(),
                cascade('Take Screenshot', 'screenshot_menu'),
                separator(),
                cascade('Aspect Ratio', 'aspect_menu'),
                cascade('Zoom', 'zoom_menu'),
                cascade('Rotate', 'rotate_menu'),
                cascade('Screen Position', 'screenpos_menu'),
                cascade('Screen Alignment', 'screenalign_menu'),
                separator(),
                cascade('Deinterlacing', 'deint_menu'),
                cascade('Filter', 'filter_menu'),
                cascade('Adjust Color', 'color_menu'),
            ),

            'vidtrack_menu': self.vidtrack_menu,

            'screenshot_menu': numbered(
                command('Screenshot', 'Ctrl+S', 'async screenshot'),
                command('Screenshot (No Subs)', 'Alt+S', 'async screenshot video'),
                command('Screenshot (Subs/OSD/Scaled)', '', 'async screenshot window'),
            ),

            'aspect_menu': numbered(
                command('Reset', 'Ctrl+Shift+R',
                        'no-osd set video-aspect-override "-1" ; show-text "Video Aspect Ratio - Reset"', repost=True),
                command('Select Next', '',
                        'cycle-values video-aspect-override "4:3" "16:10" "16:9" "1.85:1" "2.35:1" "-1" "-1"',
                        repost=True),
                separator(),
                radio('4:3 (TV)', '', 'set video-aspect-override "4:3"',
                      state=lambda: self.state_ratio('4:3'), repost=True),
                radio('16:10 (Wide Monitor)', '', 'set video-aspect-override "16:10"',
                      state=lambda: self.state_ratio('16:10'), repost=True),
                radio('16:9 (HDTV)', '', 'set video-aspect-override "16:9"',
                      state=lambda: self.state_ratio('16:9'), repost=True),
                radio('1.85:1 (Wide Vision)', '', 'set video-aspect-override "1.85:1"',
                      state=lambda: self.state_ratio('1.85:1'), repost=True),
                radio('2.35:1 (CinemaScope)', '', 'set video-aspect-override "2.35:1"',
                      state=lambda: self.state_ratio('2.35:1'), repost=True),
                separator(),
                command(f'+{_num(o.vid_aspect)}%', 'Ctrl+Shift+A',
                        f'add video-aspect-override {_num(o.vid_aspect / 100)}', repost=True),
                command(f'-{_num(o.vid_aspect)}%', 'Ctrl+Shift+D',
                        f'add video-aspect-override -{_num(o.vid_aspect / 100)}', repost=True),
            ),

            'zoom_menu': numbered(
                command('Reset', 'Shift+R', 'no-osd set panscan 0 ; show-text "Pan/Scan - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.vid_zoom)}%', 'Shift+T', f'add panscan {_num(o.vid_zoom / 100)}', repost=True),
                command(f'-{_num(o.vid_zoom)}%', 'Shift+G', f'add panscan -{_num(o.vid_zoom / 100)}', repost=True),
            ),

            'rotate_menu': numbered(
                command('Reset', '', 'set video-rotate "0"', repost=True),
                command('Select Next', '', 'cycle-values video-rotate "0" "90" "180" "270"', repost=True),
                separator(),
                *[radio(f'{angle}°', '', f'set video-rotate "{angle}"',
                        state=(lambda a=angle: self.state_rotate(a)), repost=True)
                  for angle in (0, 90, 180, 270)],
            ),

            'screenpos_menu': numbered(
                command('Reset', 'Shift+X',
                        'no-osd set video-pan-x 0 ; no-osd set video-pan-y 0 ; show-text "Video Pan - Reset"',
                        repost=True),
                separator(),
                command(f'Horizontally +{_num(o.vid_pos)}%', 'Shift+D',
                        f'add video-pan-x {_num(o.vid_pos / 100)}', repost=True),
                command(f'Horizontally -{_num(o.vid_pos)}%', 'Shift+A',
                        f'add video-pan-x -{_num(o.vid_pos / 100)}', repost=True),
                separator(),
                command(f'Vertically +{_num(o.vid_pos)}%', 'Shift+S',
                        f'add video-pan-y -{_num(o.vid_pos / 100)}', repost=True),
                command(f'Vertically -{_num(o.vid_pos)}%', 'Shift+W',
                        f'add video-pan-y {_num(o.vid_pos / 100)}', repost=True),
            ),

            # Y: -1 = Top, 0 = Center, 1 = Bottom. X: -1 = Left, 0 = Center, 1 = Right.
            'screenalign_menu': numbered(
                radio('Top', '', 'no-osd set video-align-y -1', state=lambda: self.state_align('y', -1), repost=True),
                radio('Vertical Center', '', 'no-osd set video-align-y 0',
                      state=lambda: self.state_align('y', 0), repost=True),
                radio('Bottom', '', 'no-osd set video-align-y 1', state=lambda: self.state_align('y', 1), repost=True),
                separator(),
                radio('Left', '', 'no-osd set video-align-x -1', state=lambda: self.state_align('x', -1), repost=True),
                radio('Horizontal Center', '', 'no-osd set video-align-x 0',
                      state=lambda: self.state_align('x', 0), repost=True),
                radio('Right', '', 'no-osd set video-align-x 1', state=lambda: self.state_align('x', 1), repost=True),
            ),

            'deint_menu': numbered(
                command('Toggle', 'Ctrl+D', 'cycle deinterlace', repost=True),
                command('Auto', '', 'set deinterlace "auto"', repost=True),
                separator(),
                radio('Off', '', 'no-osd set deinterlace "no"', state=lambda: self.state_deinterlace(False), repost=True),
                radio('On', '', 'no-osd set deinterlace "yes"', state=lambda: self.state_deinterlace(True), repost=True),
            ),

            'filter_menu': numbered(
                check('Flip Vertically', '', 'no-osd vf toggle vflip', state=lambda: self.state_flip('vflip'), repost=True),
                check('Flip Horizontally', '', 'no-osd vf toggle hflip', state=lambda: self.state_flip('hflip'), repost=True),
            ),

            'color_menu': numbered(
                command('Reset', 'O', 'no-osd set brightness 0 ; no-osd set contrast 0 ; no-osd set hue 0 ; '
                                      'no-osd set saturation 0 ; show-text "Colors - Reset"', repost=True),
                separator(),
                *[command(f'{name} {sign}{_num(o.vid_color)}%', key,
                          f'add {name.lower()} {"-" if sign == "-" else ""}{_num(o.vid_color)}', repost=True)
                  for name, sign, key in (
                      ('Brightness', '+', 'T'), ('Brightness', '-', 'G'),
                      ('Contrast', '+', 'Y'), ('Contrast', '-', 'H'),
                      ('Saturation', '+', 'U'), ('Saturation', '-', 'J'),
                      ('Hue', '+', 'I'), ('Hue', '-', 'K'))],
            ),

            'audio_menu': numbered(
                cascade('Track', 'audtrack_menu'),
                cascade('Sync', 'audsync_menu'),
                separator(),
                cascade('Volume', 'volume_menu'),
                cascade('Channel Layout', 'channel_layout'),
            ),

            'audtrack_menu': self.audtrack_menu,

            'audsync_menu': numbered(
                command('Reset', '\\', 'no-osd set audio-delay 0 ; show-text "Audio Sync - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.aud_sync)} ms', ']', f'add audio-delay {_num(o.aud_sync / 1000)}', repost=True),
                command(f'-{_num(o.aud_sync)} ms', '[', f'add audio-delay -{_num(o.aud_sync / 1000)}', repost=True),
            ),

            'volume_menu': numbered(
                check(self.mute_label, '', 'cycle mute', state=lambda: bool(self.prop('mute')), repost=True),
                separator(),
                command(f'+{_num(o.aud_vol)}%', 'Shift+Up', f'add volume {_num(o.aud_vol)}', repost=True),
                command(f'-{_num(o.aud_vol)}%', 'Shift+Down', f'add volume -{_num(o.aud_vol)}', repost=True),
            ),

            'channel_layout': self.channel_layout,

            'subtitle_menu': numbered(
                cascade('Track', 'subtrack_menu'),
                separator(),
                cascade('Alignment', 'subalign_menu'),
                cascade('Position', 'subpos_menu'),
                cascade('Scale', 'subscale_menu'),
                separator(),
                cascade('Sync', 'subsync_menu'),
            ),

            'subtrack_menu': self.subtrack_menu,

            'subalign_menu': numbered(
                command('Select Next', '', 'cycle-values sub-align-y "top" "bottom"', repost=True),
                separator(),
                radio('Top', '', 'set sub-align-y "top"', state=lambda: self.state_sub_align('top'), repost=True),
                radio('Bottom', '', 'set sub-align-y "bottom"', state=lambda: self.state_sub_align('bottom'), repost=True),
            ),

            'subpos_menu': numbered(
                command('Reset', 'Alt+S', 'no-osd set sub-pos 100 ; no-osd set sub-scale 1 ; '
                                          'show-text "Subtitle Position - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.sub_pos)}%', 'S', f'add sub-pos {_num(o.sub_pos)}', repost=True),
                command(f'-{_num(o.sub_pos)}%', 'W', f'add sub-pos -{_num(o.sub_pos)}', repost=True),
                separator(),
                radio('Display on Letterbox', '', 'set image-subs-video-resolution "no"',
                      state=lambda: self.state_sub_pos(False), repost=True),
                radio('Display in Video', '', 'set image-subs-video-resolution "yes"',
                      state=lambda: self.state_sub_pos(True), repost=True),
            ),

            'subscale_menu': numbered(
                command('Reset', '', 'no-osd set sub-pos 100 ; no-osd set sub-scale 1 ; '
                                     'show-text "Subtitle Position - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.sub_scale)}%', 'Shift+K', f'add sub-scale {_num(o.sub_scale / 100)}', repost=True),
                command(f'-{_num(o.sub_scale)}%', 'Shift+J', f'add sub-scale -{_num(o.sub_scale / 100)}', repost=True),
            ),

            'subsync_menu': numbered(
                command('Reset', 'Q', 'no-osd set sub-delay 0 ; show-text "Subtitle Delay - Reset"', repost=True),
                separator(),
                command(f'+{_num(o.sub_sync)} ms', 'D', f'add sub-delay +{_num(o.sub_sync / 1000)}', repost=True),
                command(f'-{_num(o.sub_sync)} ms', 'A', f'add sub-delay -{_num(o.sub_sync / 1000)}', repost=True),
            ),

            'tools_menu': numbered(
                cascade('Playlist', 'playlist_menu'),
                command('Find Subtitle (Subit)', '', 'script-binding subit'),
                command('Playback Information', 'Tab', 'script-binding display-stats-toggle', repost=True),
            ),

            'playlist_menu': numbered(
                command('Show', 'L', 'script-binding showplaylist'),
                separator(),
                command('Open', '', 'script-message open_playlist_dialog'),
                command('Save', '', 'script-binding saveplaylist'),
                command('Regenerate', '', 'script-binding loadfiles'),
                command('Clear', 'Shift+L', 'playlist-clear'),
                separator(),
                command('Append File', '', 'script-message append_files_dialog'),
                command('Append URL', '', 'script-message append_url_dialog'),
                command('Remove', '', 'playlist-remove current', repost=True),
                separator(),
                command('Move Up', '', lambda: self.move_playlist('up'),
                        disabled=self.playlist_too_short, repost=True),
                command('Move Down', '', lambda: self.move_playlist('down'),
                        disabled=self.playlist_too_short, repost=True),
                separator(),
                check('Shuffle', '', 'cycle shuffle', state=lambda: bool(self.prop('shuffle')), repost=True),
                check('Repeat', '', 'cycle-values loop-playlist "inf" "no"',
                      state=self.state_playlist_loop, repost=True),
            ),
        }
        menus.update(self.window_menus())
        return menus
