"""Unit tests for the Layout model and its lookups."""

import copy
import pickle

import pytest
from pydantic import ValidationError

from keyboard_layout import (
    DuplicateIdError,
    DuplicateLedAssignment,
    KeyboardLayoutError,
    MissingLedReference,
    key_for_led,
    keys,
    led_for_key,
    leds,
)
from keyboard_layout.models import LED, Key, Layout


class TestLayoutConstruction:
    """Test building layouts."""

    @pytest.mark.unit
    def test_keys_only(self):
        """Test creating a layout with only keys."""
        key_list = [Key.new("k1", 0, 0)]
        layout = Layout.new(key_list)

        assert layout.keys == tuple(key_list)
        assert layout.leds == ()
        assert dict(layout.key_to_led) == {}
        assert dict(layout.led_to_key) == {}

    @pytest.mark.unit
    def test_keys_and_leds(self, config_keys, config_leds):
        """Test that both indexes are built from the keys' led fields."""
        layout = Layout.new(config_keys, config_leds)

        assert dict(layout.key_to_led) == {"k1": config_leds[0], "k2": config_leds[1]}
        assert dict(layout.led_to_key) == {"l1": config_keys[0], "l2": config_keys[1]}

    @pytest.mark.unit
    def test_constructor_equivalent_to_new(self, config_keys, config_leds):
        """Test that the model constructor builds the same layout."""
        layout = Layout(keys=config_keys, leds=config_leds)
        assert layout == Layout.new(config_keys, config_leds)
        assert layout.led_for_key("k2") == config_leds[1]

    @pytest.mark.unit
    def test_accepts_any_iterable(self, config_keys, config_leds):
        """Test that generators are accepted and stored in order."""
        layout = Layout.new(iter(config_keys), (led for led in config_leds))
        assert list(layout.keys) == config_keys
        assert list(layout.leds) == config_leds

    @pytest.mark.unit
    def test_missing_led_reference(self):
        """Test that a key naming an unknown LED fails construction."""
        key_list = [Key.new("k1", 0, 0, {"led": "l9"})]

        with pytest.raises(MissingLedReference) as exc_info:
            Layout.new(key_list, [LED.new("l1", 0, 0)])

        assert exc_info.value.key_id == "k1"
        assert exc_info.value.led_id == "l9"
        assert exc_info.value.recoverable is False
        assert "l9" in str(exc_info.value)

    @pytest.mark.unit
    def test_missing_led_reference_without_leds(self):
        """Test that a key with an LED needs the LED list."""
        with pytest.raises(MissingLedReference):
            Layout.new([Key.new("k1", 0, 0, {"led": "l1"})])

    @pytest.mark.unit
    def test_duplicate_key_id(self):
        """Test that repeated key ids are rejected."""
        with pytest.raises(DuplicateIdError) as exc_info:
            Layout.new([Key.new("k1", 0, 0), Key.new("k1", 1, 0)])

        assert exc_info.value.kind == "key"
        assert exc_info.value.item_id == "k1"

    @pytest.mark.unit
    def test_duplicate_led_id(self):
        """Test that repeated LED ids are rejected."""
        with pytest.raises(DuplicateIdError) as exc_info:
            Layout.new([Key.new("k1", 0, 0)], [LED.new("l1", 0, 0), LED.new("l1", 1, 1)])

        assert exc_info.value.kind == "led"
        assert exc_info.value.item_id == "l1"

    @pytest.mark.unit
    def test_led_shared_by_two_keys(self):
        """Test that one LED cannot sit under two keys."""
        key_list = [
            Key.new("k1", 0, 0, {"led": "l1"}),
            Key.new("k2", 1, 0),
            Key.new("k3", 2, 0, {"led": "l1"}),
        ]

        with pytest.raises(DuplicateLedAssignment) as exc_info:
            Layout.new(key_list, [LED.new("l1", 0, 0)])

        assert exc_info.value.led_id == "l1"
        assert exc_info.value.key_ids == ("k1", "k3")

    @pytest.mark.unit
    def test_errors_share_base_class(self):
        """Test that construction errors can be caught together."""
        with pytest.raises(KeyboardLayoutError):
            Layout.new([Key.new("k1", 0, 0, {"led": "nope"})])


class TestLayoutImmutability:
    """Test that a built layout cannot change."""

    @pytest.mark.unit
    def test_fields_are_tuples(self, config_layout):
        """Test that the stored sequences are immutable."""
        assert isinstance(config_layout.keys, tuple)
        assert isinstance(config_layout.leds, tuple)

    @pytest.mark.unit
    def test_cannot_reassign_fields(self, config_layout):
        """Test that the layout is frozen."""
        with pytest.raises(ValidationError):
            config_layout.keys = ()

    @pytest.mark.unit
    def test_indexes_are_read_only(self, config_layout):
        """Test that the lookup indexes reject writes."""
        with pytest.raises(TypeError):
            config_layout.key_to_led["k3"] = LED.new("l3", 3, 3)

        with pytest.raises(TypeError):
            config_layout.led_to_key["l3"] = Key.new("k3", 5, 0)

    @pytest.mark.unit
    def test_caller_list_changes_do_not_leak(self, config_keys, config_leds):
        """Test that mutating the input lists leaves the layout untouched."""
        layout = Layout.new(config_keys, config_leds)
        config_keys.append(Key.new("k4", 6, 0))
        config_leds.clear()

        assert len(layout.keys) == 3
        assert len(layout.leds) == 3


class TestLayoutCopies:
    """Test copying, pickling and updating layouts."""

    @pytest.mark.unit
    def test_deepcopy(self, config_layout):
        """Test that a deep copy keeps working lookups."""
        copied = copy.deepcopy(config_layout)

        assert copied == config_layout
        assert copied.led_for_key("k1") == LED.new("l1", 0, 0)
        assert copied.key_for_led("l2").id == "k2"

    @pytest.mark.unit
    def test_pickle_round_trip(self, config_layout):
        """Test that a layout can be sent to another process."""
        restored = pickle.loads(pickle.dumps(config_layout))

        assert restored == config_layout
        assert restored.led_for_key("k3") is None
        assert dict(restored.led_to_key) == dict(config_layout.led_to_key)

    @pytest.mark.unit
    def test_model_copy_without_update(self, config_layout):
        """Test that a plain copy is equal to the original."""
        assert config_layout.model_copy() == config_layout

    @pytest.mark.unit
    def test_model_copy_update_is_validated(self, config_layout):
        """Test that dropping LEDs still referenced by keys fails."""
        with pytest.raises(MissingLedReference) as exc_info:
            config_layout.model_copy(update={"leds": ()})

        assert exc_info.value.key_id == "k1"

    @pytest.mark.unit
    def test_model_copy_update_rebuilds_indexes(self, config_layout):
        """Test that replacing keys rebuilds both lookups."""
        new_keys = [Key.new("k9", 0, 0, {"led": "l3"})]
        updated = config_layout.model_copy(update={"keys": new_keys})

        assert updated.keys == tuple(new_keys)
        assert updated.led_for_key("k1") is None
        assert updated.led_for_key("k9") == LED.new("l3", 3, 3)
        assert updated.key_for_led("l1") is None
        assert dict(updated.led_to_key) == {"l3": new_keys[0]}


class TestLayoutQueries:
    """Test lookups on the reference layout."""

    @pytest.mark.unit
    def test_keys_preserve_order(self, config_layout, config_keys):
        """Test that keys come back in input order."""
        assert list(keys(config_layout)) == config_keys
        assert keys(config_layout) == config_layout.keys

    @pytest.mark.unit
    def test_leds_preserve_order(self, config_layout, config_leds):
        """Test that LEDs come back in input order."""
        assert list(leds(config_layout)) == config_leds
        assert leds(config_layout) == config_layout.leds

    @pytest.mark.unit
    def test_led_for_key(self, config_layout):
        """Test finding the LED under a key."""
        assert led_for_key(config_layout, "k1") == LED.new("l1", 0, 0)
        assert config_layout.led_for_key("k2") == LED.new("l2", 2, 1.5)

    @pytest.mark.unit
    def test_led_for_key_without_led(self, config_layout):
        """Test that a key with no LED yields None."""
        assert led_for_key(config_layout, "k3") is None

    @pytest.mark.unit
    def test_led_for_unknown_key(self, config_layout):
        """Test that an unknown key id also yields None."""
        assert led_for_key(config_layout, "missing") is None

    @pytest.mark.unit
    def test_key_for_led(self, config_layout):
        """Test finding the key above an LED."""
        expected = Key(id="k1", x=0, y=0, width=1, height=1, led="l1")
        assert key_for_led(config_layout, "l1") == expected
        assert config_layout.key_for_led("l2").id == "k2"

    @pytest.mark.unit
    def test_key_for_unassigned_led(self, config_layout):
        """Test that an LED no key claims yields None."""
        assert key_for_led(config_layout, "l3") is None
        assert key_for_led(config_layout, "missing") is None

    @pytest.mark.unit
    def test_indexes_are_inverse(self, config_layout):
        """Test that every key/LED association resolves both ways."""
        for key in config_layout.keys:
            led = config_layout.led_for_key(key.id)
            if key.led is None:
                assert led is None
                assert key.id not in config_layout.key_to_led
            else:
                assert led.id == key.led
                assert config_layout.key_for_led(led.id) == key

        assert set(config_layout.led_to_key) == {"l1", "l2"}
