"""Undo/redo walkthrough -- a media player driven by events.

Demonstrates:
- Building a machine from a config document
- Triggering events and jumping directly with change_state
- Stepping back and forth through history with undo/redo
- Observing every move with on_transition

Run: python -m examples.workflow
"""

from fsm_history import FSM, NoTransitionError

PLAYER = {
    "initial": "idle",
    "states": {
        "idle": {"transitions": {"start": "running"}},
        "running": {"transitions": {"pause": "paused", "stop": "idle"}},
        "paused": {"transitions": {"resume": "running"}},
    },
}


def show(fsm: FSM) -> None:
    trail = "  ".join(
        f"[{e.name}]" if e.active else e.name for e in fsm.history
    )
    print(f"  state={fsm.get_state():<8} history: {trail}")


def main() -> None:
    print("=== Undo/redo walkthrough ===\n")

    fsm = FSM(PLAYER, on_transition=lambda old, new: print(f"  {old} -> {new}"))
    show(fsm)

    for event in ("start", "pause"):
        fsm.trigger(event)
        show(fsm)

    print("\nundo twice:")
    while fsm.undo():
        show(fsm)
    print("  nothing left to undo")

    print("\nredo:")
    fsm.redo()
    show(fsm)

    print("\njump straight to paused (ignores the transition table):")
    fsm.change_state("paused")
    show(fsm)

    print(f"\nstates accepting 'stop': {fsm.get_states('stop')}")
    try:
        fsm.trigger("stop")
    except NoTransitionError as exc:
        print(f"  rejected: {exc}")

    fsm.clear_history()
    print(f"\nafter clear_history: state={fsm.get_state()}, undo={fsm.undo()}")


if __name__ == "__main__":
    main()
