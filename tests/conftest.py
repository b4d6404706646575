import pytest

from ircline import CommandCodec, FastCommandCodec, TagsCodec, LazyTagsCodec


def pytest_addoption(parser):
    # Add option to skip slow tests.
    parser.addoption('--skip-slow', action='store_true', help='skip slow tests')


def pytest_configure(config):
    for marker, description in [
        ('unit', 'pure unit tests'),
        ('slow', 'slow tests, skipped with --skip-slow'),
        ('rfc1459', 'RFC1459 message, command and prefix tests'),
        ('ircv3', 'IRCv3 message tag tests'),
        ('ctcp', 'CTCP content tests'),
    ]:
        config.addinivalue_line('markers', '{}: {}'.format(marker, description))


def pytest_runtest_setup(item):
    if 'slow' in item.keywords and item.config.getoption('--skip-slow'):
        pytest.skip('skipping slow test (--skip-slow given)')


@pytest.fixture(params=[CommandCodec, FastCommandCodec], ids=['reference', 'fast'])
def command_codec(request):
    return request.param()


@pytest.fixture(params=[TagsCodec, LazyTagsCodec], ids=['eager', 'lazy'])
def tags_codec(request):
    return request.param()
