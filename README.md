# joyconf

`joyconf` models the configuration of a programmable USB joystick controller.
It holds the state and rules that a configurator needs: which function each
pin has, how logical buttons map to physical inputs, and how encoders, LEDs
and shift registers are set up. A front end can be built on top of it.

## Modules

- **`joyconf.model`**: the device configuration and its enumerations.
  - `DeviceConfig` holds `Button`, `ShiftConfig`, `Led`, `LedPwm` and
    `ShiftRegisterConfig` entries, along with the button timers and debounce
    times.
  - The enumerations are `PinType`, `ButtonType`, `TimerIndex`, `EncoderType`,
    `LedType` and `ShiftRegType`.
  - `ParamsReport` decodes the live state bits with `logical_button()`,
    `physical_button()` and `shift_active()`.
  - `app_version()` returns the version string, `"1.7.1b4"`.
- **`joyconf.pins`**: the pins themselves.
  - `pin_list()` lists the board's 30 pins as `PinInfo`.
  - `pin_types()` lists the pin functions as `PinTypeEntry`.
  - `PinComboBox` holds the function chosen for one pin. It knows which
    functions that pin may take and which entries are enabled. It tells
    listeners when the choice changes, and when another pin must follow it,
    as SPI and I2C companion pins do.
- **`joyconf.currentconfig`**: `CurrentConfig` keeps running totals of axis
  sources, buttons and LEDs. Listeners are told when the button total goes
  above 128 or the LED total goes above 24.
- **`joyconf.pinconfig`**: `PinConfig` owns one `PinComboBox` per pin and keeps
  them consistent.
  - It updates the totals in `CurrentConfig`.
  - It disables the shift-register latch, data and clock entries on the other
    pins once four of a kind are in use.
  - It resets LED PWM on pin A8 and disables it there while an SPI pin is
    selected.
  - It reports fast-encoder, shift-register and axis-source pins to listeners.
  - It records the selected `Board`.
- **`joyconf.buttons`**: the button editors.
  - `LogicalButton` edits one logical button: its physical source, function,
    shift and timers.
  - `PhysicalButton` is the live indicator for one physical input.
- **`joyconf.buttonconfig`**: `ButtonConfig` is the whole button page.
  - It keeps at most 15 buttons each as encoder A and encoder B inputs.
  - It reports encoder inputs to listeners.
  - It assigns the physical button that was last pressed to the focused
    logical button.
  - It shows the live button and shift states from a `ParamsReport`.
- **`joyconf.encoders`**: `Encoder` and `EncodersConfig`. The encoder A and B
  inputs are kept in ascending order, and the pins of the fast encoder are
  tracked.
- **`joyconf.leds`**: `LedWidget` is one LED and its input binding, and
  `LedConfig` holds the visible LEDs and the four PWM channels.
- **`joyconf.shiftregs`**: `ShiftRegister` and `ShiftRegistersConfig`. The
  selected latch, clock and data pins are spread over the registers.
- **`joyconf.debuglog`**: `DebugLog` counts packets and works out the average
  interval between them. It keeps timestamped messages and a history of
  button presses and releases. It can also append the messages to a file in a
  chosen folder.
- **`joyconf.configfolder`**: `cfg_files_list()` lists the `.cfg` files in a
  folder. `ConfigFolder` tracks the folder currently in use.
- **`joyconf.switch`**: `SwitchButton` is a two-state light/dark toggle that
  flips when a left click completes.
- **`joyconf.geometry`**: two layout helpers, `centered_label_offset()` and
  `info_label_height_for_width()`.

Every editor has `read_from_config(config)` and `write_to_config(config)`
methods that copy its state from and to a `DeviceConfig`.

## Example

```python
from joyconf.model import DeviceConfig, PinType
from joyconf.pinconfig import PinConfig, Board

config = DeviceConfig()
config.pins[0] = PinType.BUTTON_GND

pins = PinConfig(Board.BLUE_PILL)
pins.read_from_config(config)
print(pins.current_config.total_buttons)  # 1
print(pins.limit_is_reached())            # False
pins.write_to_config(config)
```

## What it does not do

- It has no graphical interface and no command-line program.
- It does not talk to the device over USB.
- It does not read or write the device's configuration in its binary form,
  and it does not store application settings.

It works on in-memory `DeviceConfig` and `ParamsReport` objects, which the
caller fills and sends.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```