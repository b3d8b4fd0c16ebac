"""Sound effect ids referenced by the overlay."""

UI_BOOP = 2266
TELEPORT_VWOOP = 200

PRAYER_ACTIVATE_THICK_SKIN = 2690
PRAYER_ACTIVATE_BURST_OF_STRENGTH = 2688
PRAYER_ACTIVATE_CLARITY_OF_THOUGHT = 2664
PRAYER_ACTIVATE_SHARP_EYE_RIGOUR = 2685
PRAYER_ACTIVATE_MYSTIC_WILL_AUGURY = 2670
PRAYER_ACTIVATE_ROCK_SKIN = 2684
PRAYER_ACTIVATE_SUPERHUMAN_STRENGTH = 2689
PRAYER_ACTIVATE_IMPROVED_REFLEXES = 2662
PRAYER_ACTIVATE_RAPID_RESTORE_PRESERVE = 2679
PRAYER_ACTIVATE_RAPID_HEAL = 2678
PRAYER_ACTIVATE_PROTECT_ITEM = 1982
PRAYER_ACTIVATE_HAWK_EYE = 2666
PRAYER_ACTIVATE_MYSTIC_LORE = 2668
PRAYER_ACTIVATE_STEEL_SKIN = 2687
PRAYER_ACTIVATE_ULTIMATE_STRENGTH = 2691
PRAYER_ACTIVATE_INCREDIBLE_REFLEXES = 2667
PRAYER_ACTIVATE_PROTECT_FROM_MAGIC = 2675
PRAYER_ACTIVATE_PROTECT_FROM_MISSILES = 2677
PRAYER_ACTIVATE_PROTECT_FROM_MELEE = 2676
PRAYER_ACTIVATE_EAGLE_EYE = 2665
PRAYER_ACTIVATE_MYSTIC_MIGHT = 2669
PRAYER_ACTIVATE_RETRIBUTION = 2682
PRAYER_ACTIVATE_REDEMPTION = 2680
PRAYER_ACTIVATE_SMITE = 2686
PRAYER_ACTIVATE_CHIVALRY = 3826
PRAYER_ACTIVATE_PIETY = 3825
PRAYER_DEACTIVE_VWOOP = 2663

# Played without a source actor, but always made by a player
SOURCELESS_PLAYER_SOUNDS: frozenset[int] = frozenset({TELEPORT_VWOOP})

PRAYER_SOUNDS: frozenset[int] = frozenset(
    {
        PRAYER_ACTIVATE_THICK_SKIN,
        PRAYER_ACTIVATE_BURST_OF_STRENGTH,
        PRAYER_ACTIVATE_CLARITY_OF_THOUGHT,
        PRAYER_ACTIVATE_SHARP_EYE_RIGOUR,
        PRAYER_ACTIVATE_MYSTIC_WILL_AUGURY,
        PRAYER_ACTIVATE_ROCK_SKIN,
        PRAYER_ACTIVATE_SUPERHUMAN_STRENGTH,
        PRAYER_ACTIVATE_IMPROVED_REFLEXES,
        PRAYER_ACTIVATE_RAPID_RESTORE_PRESERVE,
        PRAYER_ACTIVATE_RAPID_HEAL,
        PRAYER_ACTIVATE_PROTECT_ITEM,
        PRAYER_ACTIVATE_HAWK_EYE,
        PRAYER_ACTIVATE_MYSTIC_LORE,
        PRAYER_ACTIVATE_STEEL_SKIN,
        PRAYER_ACTIVATE_ULTIMATE_STRENGTH,
        PRAYER_ACTIVATE_INCREDIBLE_REFLEXES,
        PRAYER_ACTIVATE_PROTECT_FROM_MAGIC,
        PRAYER_ACTIVATE_PROTECT_FROM_MISSILES,
        PRAYER_ACTIVATE_PROTECT_FROM_MELEE,
        PRAYER_ACTIVATE_EAGLE_EYE,
        PRAYER_ACTIVATE_MYSTIC_MIGHT,
        PRAYER_ACTIVATE_RETRIBUTION,
        PRAYER_ACTIVATE_REDEMPTION,
        PRAYER_ACTIVATE_SMITE,
        PRAYER_ACTIVATE_CHIVALRY,
        PRAYER_ACTIVATE_PIETY,
        PRAYER_DEACTIVE_VWOOP,
    }
)
