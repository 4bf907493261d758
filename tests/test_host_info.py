"""Tests for host_info.py.

Tests hostname, OS and architecture detection with mocked platform data.
"""

from unittest.mock import patch

from host_info import get_host_identity, get_hostname, get_os_id, get_os_version


class TestGetOsId:
    """Tests for get_os_id function."""

    @patch("platform.system")
    def test_lowercased(self, mock_system):
        """Test platform name is lowercased to an identifier."""
        mock_system.return_value = "Darwin"
        assert get_os_id() == "darwin"


class TestGetHostname:
    """Tests for get_hostname function."""

    @patch("socket.gethostname")
    def test_hostname(self, mock_hostname):
        mock_hostname.return_value = "workstation-42"
        assert get_hostname() == "workstation-42"

    @patch("socket.gethostname")
    def test_failure_empty(self, mock_hostname):
        """Test unreadable hostname gives ""."""
        mock_hostname.side_effect = OSError("no hostname")
        assert get_hostname() == ""


class TestGetOsVersion:
    """Tests for get_os_version function."""

    @patch("platform.freedesktop_os_release")
    def test_linux_os_release(self, mock_release):
        """Test Linux uses VERSION_ID from os-release."""
        mock_release.return_value = {"NAME": "Ubuntu", "VERSION_ID": "22.04"}
        assert get_os_version("linux") == "22.04"

    @patch("platform.release")
    @patch("platform.freedesktop_os_release")
    def test_linux_without_os_release(self, mock_os_release, mock_release):
        """Test missing os-release falls back to kernel release."""
        mock_os_release.side_effect = OSError("missing")
        mock_release.return_value = "6.1.0-18-amd64"
        assert get_os_version("linux") == "6.1.0-18-amd64"

    @patch("platform.mac_ver")
    def test_darwin(self, mock_mac_ver):
        mock_mac_ver.return_value = ("14.5", ("", "", ""), "arm64")
        assert get_os_version("darwin") == "14.5"

    @patch("platform.version")
    def test_windows(self, mock_version):
        mock_version.return_value = "10.0.22631"
        assert get_os_version("windows") == "10.0.22631"

    @patch("platform.release")
    def test_unknown_os_uses_release(self, mock_release):
        mock_release.return_value = "13.2-RELEASE"
        assert get_os_version("freebsd") == "13.2-RELEASE"


class TestGetHostIdentity:
    """Tests for get_host_identity function."""

    @patch("host_info.get_os_version")
    @patch("socket.gethostname")
    @patch("platform.machine")
    @patch("platform.system")
    def test_known_platform(self, mock_system, mock_machine, mock_hostname, mock_version):
        """Test display names come from the configured maps."""
        mock_system.return_value = "Linux"
        mock_machine.return_value = "x86_64"
        mock_hostname.return_value = "workstation-42"
        mock_version.return_value = "22.04"

        identity = get_host_identity()

        assert identity.hostname == "workstation-42"
        assert identity.platform_label == "Linux (linux)"
        assert identity.os_version == "22.04"
        assert identity.arch_label == "AMD/Intel x64 (x86_64)"

    @patch("host_info.get_os_version")
    @patch("socket.gethostname")
    @patch("platform.machine")
    @patch("platform.system")
    def test_unknown_platform(self, mock_system, mock_machine, mock_hostname, mock_version):
        """Test unmapped identifiers render as Unknown."""
        mock_system.return_value = "Plan9"
        mock_machine.return_value = "MIPS"
        mock_hostname.return_value = "bell"
        mock_version.return_value = ""

        identity = get_host_identity()

        assert identity.platform_label == "Unknown (plan9)"
        assert identity.arch_label == "Unknown (mips)"
