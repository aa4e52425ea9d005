import json

import pytest

from magnetlink.main import main, make_parser

BTIH = "ad42ce8109f54c99613ce38f9b4d87e70f24a165"
MAGNET_LINK = (
    f"magnet:?xt=urn:btih:{BTIH}&dn=magnet1.gif"
    "&tr=http%3A%2F%2Fbittorrent-test-tracker.codecrafters.io%2Fannounce"
)


class TestMain:
    def test_parse(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["parse", MAGNET_LINK])
        out = capsys.readouterr().out.splitlines()
        assert "Display Name: magnet1.gif" in out
        assert f"Exact Topic: btih:{BTIH}" in out
        assert "Tracker URL: http://bittorrent-test-tracker.codecrafters.io/announce" in out

    def test_hashes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["hashes", MAGNET_LINK])
        assert capsys.readouterr().out == f"btih: {BTIH}\n"

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["json", MAGNET_LINK])
        data = json.loads(capsys.readouterr().out)
        assert data["display_names"] == ["magnet1.gif"]
        assert data["exact_length"] == 0

    def test_error_exits_with_kind(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "magnet2:?dn=a"])
        assert exc_info.value.code == 1
        assert "error: MalformedUri:" in capsys.readouterr().err

    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            make_parser().parse_args([])
