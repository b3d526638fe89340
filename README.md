# winget-types

Validated Python types for values found in WinGet installer manifests:
minimum OS versions, platforms, protocols, markets, nested installer files,
installer switches and the enumerations used alongside them.

Each type checks its input when it is built and raises a specific exception
when the value is not allowed. Every exception raised for a bad value is a
subclass of `ValueError`.

## Installation

```
pip install winget-types
```

## Examples

```python
from winget_types.installer.minimum_os_version import MinimumOSVersion
from winget_types.installer.platform import Platform
from winget_types.installer.market.markets import Markets
from winget_types.installer.switches.switch import InstallerSwitch

version = MinimumOSVersion.parse("10.0.17763")
print(version)                      # 10.0.17763.0

platforms = Platform.from_list(["Windows.Universal", "Windows.Desktop"])
print(platforms.to_list())          # ['Windows.Desktop', 'Windows.Universal']

markets = Markets.allowed_from_iter(["US", "UK"])
print(list(markets))                # [Market('UK'), Market('US')]
print(markets.to_dict())            # {'AllowedMarkets': ['UK', 'US']}

switch = InstallerSwitch.parse("/ALLUSERS, /NoRestart")
print(switch)                       # /ALLUSERS /NoRestart
print(switch.contains("/allusers")) # True
```

## What is in the package

All modules live under `winget_types.installer`:

- `minimum_os_version`: `MinimumOSVersion`, four unsigned 16-bit parts;
  `parse` fills missing trailing parts with zero.
- `platform`, `unsupported_arguments`, `unsupported_os_architectures`:
  flag sets (`Platform`, `UnsupportedArguments`, `UnsupportedOSArchitecture`)
  with `to_list` / `from_list` for the list form used in manifests; `to_list`
  always returns names in a fixed order.
- `protocol`: `Protocol`.
- `scope`: `Scope`, with `parse` for an exact name and `find_in` to look for
  `user` or `machine` anywhere in a string or bytes, ignoring ASCII case.
- `upgrade_behavior`: `UpgradeBehavior`, with `parse` for names such as
  `UninstallPrevious`.
- `repair_behavior`, `return_response`: `RepairBehavior` and `ReturnResponse`
  enumerations; `ReturnResponse.as_str` gives a readable description.
- `nested.installer_type`, `nested.portable_command_alias`,
  `nested.installer_files`: `NestedInstallerType`, `PortableCommandAlias` and
  `NestedInstallerFiles` (with `to_dict` / `from_dict`).
- `market.market`, `market.markets`: `Market` and `Markets`, an allowed or
  excluded set with `add`, `remove`, `clear`, membership, `to_dict` and
  `from_dict`.
- `switches.switch`, `switches.custom`, `switches.silent`,
  `switches.installer_switches`: `InstallerSwitch`, `CustomSwitch`,
  `SilentSwitch`, `SilentWithProgressSwitch`, and `InstallerSwitches`, which
  groups them and converts to and from the manifest mapping with `to_dict`
  and `from_dict`.

## Limits enforced

- `Protocol`: non-empty, at most 2048 characters.
- `PortableCommandAlias`: non-empty after trimming, at most 40 characters.
- `Market`: exactly two ASCII uppercase letters; `Markets` holds at most 256.
- Switches: non-empty, at most 512 characters (2048 for `CustomSwitch`).

## What the package does not do

It provides the individual value types only. There is no type for a whole
installer manifest or a single installer entry, and the package does not read
or write YAML itself: `to_dict`, `to_list` and their `from_*` counterparts work
on plain Python dictionaries, lists and strings, to be passed to a YAML or JSON
library of your choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```