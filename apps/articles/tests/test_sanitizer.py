"""
Tests for the article HTML sanitizer.
"""

import pytest
from unittest.mock import patch

from apps.core.exceptions import ProcessingError
from apps.articles.sanitizer import SanitizePolicy, default_policy, sanitize_html


class TestAllowList:

    def test_script_removed_with_content(self):
        assert sanitize_html('<script>alert(1)</script><p>hi</p>') == '<p>hi</p>'

    def test_style_removed_siblings_kept(self):
        html = '<style>p { color: red; }</style><p>kept</p><h2>also kept</h2>'
        assert sanitize_html(html) == '<p>kept</p><h2>also kept</h2>'

    def test_iframe_with_allowed_attributes_survives(self):
        html = (
            '<iframe src="https://www.youtube.com/embed/abc" width="560" height="315" '
            'frameborder="0" allowfullscreen></iframe>'
        )
        result = sanitize_html(html)

        assert result.startswith('<iframe')
        assert 'src="https://www.youtube.com/embed/abc"' in result
        assert 'width="560"' in result
        assert 'frameborder="0"' in result
        assert 'allowfullscreen' in result

    def test_iframe_event_handler_dropped(self):
        result = sanitize_html('<iframe src="https://x.test/" onload="steal()"></iframe>')
        assert 'onload' not in result
        assert '<iframe' in result

    def test_disallowed_tag_unwrapped_not_escaped(self):
        assert sanitize_html('<p><font color="red">text</font></p>') == '<p>text</p>'

    def test_disallowed_attributes_stripped(self):
        result = sanitize_html('<p onclick="x()" class="lead" data-x="1">hi</p>')
        assert result == '<p class="lead">hi</p>'

    def test_frame_attributes_only_on_iframes(self):
        assert sanitize_html('<div allow="camera">x</div>') == '<div>x</div>'

    @pytest.mark.parametrize('href', [
        'javascript:alert(1)',
        'JavaScript:alert(1)',
        ' java\tscript:alert(1)',
        'vbscript:msgbox',
        'data:text/html;base64,AAAA',
    ])
    def test_unsafe_urls_dropped(self, href):
        assert sanitize_html(f'<a href="{href}">x</a>') == '<a>x</a>'

    def test_safe_link_kept(self):
        html = '<a href="https://gwm.example/tank" target="_blank" title="Tank">Tank</a>'
        assert sanitize_html(html) == html

    def test_image_kept(self):
        html = '<img alt="Tank 300" src="https://media.example.com/images/t.png"/>'
        assert sanitize_html(html) == html

    def test_comments_removed(self):
        assert sanitize_html('<p>a<!-- secret --></p>') == '<p>a</p>'

    def test_nested_containers_removed(self):
        assert sanitize_html('<object><embed src="x.swf"></object><p>ok</p>') == '<p>ok</p>'

    def test_table_structure_kept(self):
        html = '<table><thead><tr><th>Spec</th></tr></thead><tbody><tr><td>2.0T</td></tr></tbody></table>'
        assert sanitize_html(html) == html

    @pytest.mark.parametrize('html', [None, ''])
    def test_empty(self, html):
        assert sanitize_html(html) == ''


class TestFailurePolicy:

    def test_passthrough_returns_original(self, caplog):
        raw = '<p onclick="x()">hi</p>'
        with patch('apps.articles.sanitizer._clean', side_effect=RuntimeError("parser crashed")):
            assert sanitize_html(raw, SanitizePolicy.PASSTHROUGH) == raw
        assert 'Sanitization failed' in caplog.text

    def test_reject_raises(self):
        with patch('apps.articles.sanitizer._clean', side_effect=RuntimeError("parser crashed")):
            with pytest.raises(ProcessingError) as exc:
                sanitize_html('<p>hi</p>', SanitizePolicy.REJECT)
        assert exc.value.status_code == 422
        assert exc.value.field == 'content'

    def test_policy_accepts_plain_string(self):
        with patch('apps.articles.sanitizer._clean', side_effect=RuntimeError("boom")):
            with pytest.raises(ProcessingError):
                sanitize_html('<p>hi</p>', 'reject')

    def test_default_from_settings(self, settings):
        settings.ARTICLE_SANITIZE_FAILURE_POLICY = 'reject'
        assert default_policy() is SanitizePolicy.REJECT

    def test_bad_setting(self, settings):
        from django.core.exceptions import ImproperlyConfigured
        settings.ARTICLE_SANITIZE_FAILURE_POLICY = 'ignore'
        with pytest.raises(ImproperlyConfigured):
            default_policy()
