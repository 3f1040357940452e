"""Tests for platform detection and driver adapters."""

import asyncio
import subprocess
import time

import pytest

from navtrack.driver.adb import REMOTE_DUMP_PATH, AdbUIDriver
from navtrack.driver.appium import AppiumDriverAdapter
from navtrack.driver.base import DriverError, Platform, detect_platform
from navtrack.driver.device import ADBError, Device


class TestDetectPlatform:

    @pytest.mark.parametrize(
        "capabilities, platform",
        [
            ({"platformName": "Android", "automationName": "UiAutomator2"}, Platform.ANDROID),
            ({"platformName": "", "automationName": "Espresso-Android"}, Platform.ANDROID),
            ({"platformName": "iOS", "automationName": "XCUITest"}, Platform.IOS),
            ({"automationName": "xcuitest"}, Platform.IOS),
            ({"platformName": "ios"}, Platform.IOS),
            ({"platformName": "Windows", "automationName": "Windows"}, Platform.UNKNOWN),
            ({}, Platform.UNKNOWN),
            (None, Platform.UNKNOWN),
        ],
    )
    def test_detection(self, capabilities, platform):
        assert detect_platform(capabilities).platform is platform

    def test_keeps_reported_names(self):
        info = detect_platform({"platformName": "Android", "automationName": "UiAutomator2"})

        assert info.platform_name == "Android"
        assert info.automation_name == "UiAutomator2"
        assert info.is_android and not info.is_ios


class StubWebDriver:
    """Shape of an Appium ``webdriver.Remote`` session."""

    session_id = "4f1c"
    page_source = "<hierarchy/>"
    current_url = "https://example.com/docs/intro"
    capabilities = {"platformName": "Android"}


class TestAppiumDriverAdapter:

    @pytest.mark.asyncio
    async def test_reads_page_source_and_url(self):
        adapter = AppiumDriverAdapter(StubWebDriver())

        assert await adapter.get_snapshot() == "<hierarchy/>"
        assert await adapter.get_current_location() == "https://example.com/docs/intro"
        assert adapter.session_id == "4f1c"

    def test_capabilities_fall_back_to_caps(self):
        class OldDriver:
            capabilities = None
            caps = {"platformName": "iOS"}

        assert AppiumDriverAdapter(OldDriver()).get_capabilities() == {"platformName": "iOS"}

    @pytest.mark.asyncio
    async def test_driver_errors_propagate(self):
        class BrokenDriver:
            @property
            def page_source(self):
                raise RuntimeError("session deleted")

        with pytest.raises(RuntimeError):
            await AppiumDriverAdapter(BrokenDriver()).get_snapshot()

    @pytest.mark.asyncio
    async def test_timeout_reported_as_driver_error(self):
        class SlowDriver:
            @property
            def page_source(self):
                time.sleep(0.5)
                return "<late/>"

        adapter = AppiumDriverAdapter(SlowDriver(), timeout=0.05)

        with pytest.raises(DriverError):
            await adapter.get_snapshot()

    @pytest.mark.asyncio
    async def test_none_is_reported_as_driver_error(self):
        class EmptyDriver:
            current_url = None

        with pytest.raises(DriverError):
            await AppiumDriverAdapter(EmptyDriver()).get_current_location()


class FakeDevice(Device):
    """Device answering shell commands from a table."""

    def __init__(self, responses):
        super().__init__("emulator-5554")
        self.responses = responses
        self.commands = []

    def shell(self, command, *, timeout=None):
        self.commands.append(command)
        response = self.responses[command]
        if isinstance(response, Exception):
            raise response
        return response


class TestAdbUIDriver:

    @pytest.mark.asyncio
    async def test_snapshot_dumps_and_reads_hierarchy(self):
        device = FakeDevice({
            f"uiautomator dump {REMOTE_DUMP_PATH}": "UI hierchary dumped to: /sdcard/window_dump.xml",
            f"cat {REMOTE_DUMP_PATH}": "<?xml version='1.0'?><hierarchy rotation=\"0\"/>",
        })

        snapshot = await AdbUIDriver(device).get_snapshot()

        assert snapshot.endswith('<hierarchy rotation="0"/>')
        assert device.commands == [f"uiautomator dump {REMOTE_DUMP_PATH}", f"cat {REMOTE_DUMP_PATH}"]

    @pytest.mark.asyncio
    async def test_bad_dump_raises_driver_error(self):
        device = FakeDevice({
            f"uiautomator dump {REMOTE_DUMP_PATH}": "ERROR: could not get idle state.",
            f"cat {REMOTE_DUMP_PATH}": "cat: /sdcard/window_dump.xml: No such file or directory",
        })

        with pytest.raises(DriverError):
            await AdbUIDriver(device).get_snapshot()

    @pytest.mark.asyncio
    async def test_location_unsupported(self):
        with pytest.raises(DriverError):
            await AdbUIDriver(FakeDevice({})).get_current_location()

    def test_capabilities(self):
        capabilities = AdbUIDriver(FakeDevice({})).get_capabilities()

        assert detect_platform(capabilities).platform is Platform.ANDROID
        assert capabilities["deviceName"] == "emulator-5554"


class TestDevice:

    def test_parse_devices(self):
        output = (
            "List of devices attached\n"
            "emulator-5554\tdevice\n"
            "R58M12ABCDE\tunauthorized\n"
            "\n"
            "192.168.1.20:5555\tdevice\n"
        )

        assert Device._parse_devices(output) == ["emulator-5554", "192.168.1.20:5555"]

    def test_from_emulator_without_emulator(self, monkeypatch):
        monkeypatch.setattr(Device, "list_devices", classmethod(lambda cls: ["R58M12ABCDE"]))

        with pytest.raises(ADBError):
            Device.from_emulator()

    def test_from_emulator_picks_first(self, monkeypatch):
        monkeypatch.setattr(Device, "list_devices", classmethod(lambda cls: ["R58", "emulator-5556", "emulator-5554"]))

        assert Device.from_emulator().serial == "emulator-5556"

    def test_shell_failure_is_adb_error(self, monkeypatch):
        def failing_check_output(*args, **kwargs):
            raise subprocess.CalledProcessError(1, args[0])

        monkeypatch.setattr(subprocess, "check_output", failing_check_output)

        with pytest.raises(ADBError):
            Device("emulator-5554").shell("getprop")

    def test_adb_error_is_driver_error(self):
        assert issubclass(ADBError, DriverError)


def test_adapters_satisfy_protocol():
    from navtrack.driver.base import UIDriver

    assert isinstance(AppiumDriverAdapter(StubWebDriver()), UIDriver)
    assert isinstance(AdbUIDriver(FakeDevice({})), UIDriver)
    assert asyncio.iscoroutinefunction(AdbUIDriver.get_snapshot)
