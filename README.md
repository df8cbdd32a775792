# slstatus

A small status monitor for window manager status bars. Once per interval it
collects a line of system information (volume, CPU and memory use, battery
state, network speed, date and time) and either prints it or sets it as the
name of the X root window, which window managers such as dwm show in their
bar.

It reads Linux interfaces (`/proc`, `/sys`, `ioctl` on sockets and mixer
devices), so it is meant for Linux.

## Installation

    pip install .

## Usage

    slstatus [-v] [-s] [-1]

- With no option, the status line is set as the root window name once per
  interval. This runs the `xsetroot` program and needs `DISPLAY` to be set;
  on exit the name is cleared.
- `-s` writes the status line to standard output once per interval instead.
- `-1` writes a single status line to standard output and exits.
- `-v` prints `slstatus-1.0` to standard error and exits with status 1.

Any other argument prints the usage line to standard error and exits with
status 1. `SIGINT` or `SIGTERM` stops the loop; `SIGUSR1` forces an
immediate refresh.

The same entry point is available as `slstatus.main.main(argv=None)`, which
returns the exit status.

## Configuration

The refresh interval (`INTERVAL`, 1000 ms), the placeholder for missing
values (`UNKNOWN_STR`, `n/a`) and the maximum status size (`MAXLEN`, 2048
bytes) live in `slstatus.config`. The entries shown are returned by
`slstatus.config.default_args()`: a list of `Arg(func, fmt, args)` records,
each pairing a component with a format such as `"[%s%] "` and an argument
such as a battery or interface name. There is no configuration file; to
change what is shown, build your own list of `Arg` and pass it to
`slstatus.main.run`:

    from slstatus.config import Arg
    from slstatus.main import Options, run
    from slstatus.system import datetime, load_avg

    run([Arg(load_avg, "[%s] "), Arg(datetime, "%s", "%F %T")],
        Options(single=True, once=True))

In a format, `%s` is replaced by the value and `%%` by `%`; other `%`
sequences are kept as written. `slstatus.main.build_status` joins the
entries into one line, cutting it when it would reach `MAXLEN` bytes.

## Components

Every component takes one argument (unused by some) and returns a string, or
`None` when the value is not available:

- `slstatus.battery`: `battery_perc`, `battery_state` (`+`, `-`, `o` or `?`),
  `battery_remaining` (`Hh Mm` while discharging)
- `slstatus.cpu`: `cpu_freq`, `cpu_perc` (usage since the previous call; the
  first call gives `None`). `CpuMeter` measures from any stat file.
- `slstatus.disk`: `disk_free`, `disk_perc`, `disk_total`, `disk_used`
- `slstatus.files`: `cat` (first line of a file), `num_files`
- `slstatus.memory`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`,
  `swap_free`, `swap_perc`, `swap_total`, `swap_used`, and `read_meminfo`
- `slstatus.network`: `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx` (rate since
  the previous call). `NetSpeed` measures one direction at a given interval.
- `slstatus.system`: `datetime`, `entropy`, `hostname`, `kernel_release`,
  `load_avg`, `uptime`, `gid`, `uid`, `username`
- `slstatus.command`: `run_command` (first line a shell command prints)
- `slstatus.temperature`: `temp` (whole degrees Celsius from a sensor file)
- `slstatus.volume`: `vol_perc` (OSS mixer device)
- `slstatus.wifi`: `wifi_perc`, `wifi_essid`, and the helpers `rssi_to_perc`
  and `parse_wireless`

Sizes come out in human-readable form:

    >>> from slstatus.util import fmt_human
    >>> fmt_human(1536, 1024)
    '1.5 Ki'

## What it does not do

- It does not read the keyboard state from the X server. `slstatus.keyboard`
  only formats a given LED mask (`format_indicators`) and picks a layout out
  of an xkb symbols name (`get_layout`, `valid_layout_or_variant`); there are
  no caps/num lock or keymap components.
- It does not talk to the X server itself; the root window name is set
  through `xsetroot`.
- It has no BSD support (sysctl, sndio, APM).

## Tests

    pip install .[test]
    pytest