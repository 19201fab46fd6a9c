import logging

from bookie import ReentrantDispatchError, create_store

logging.basicConfig(level=logging.DEBUG)


def main() -> None:
    store = create_store()

    todos = store.create_register("todos", ())
    filters = store.create_register("filter", "all")
    ui = store.create_register("ui", {})
    dialog = ui.create_register("dialog")

    add_todo = todos.create_action(lambda items, text: (*items, {"text": text, "done": False}))
    toggle = todos.create_action(
        lambda items, index: tuple(
            {**item, "done": not item["done"]} if i == index else item
            for i, item in enumerate(items)
        )
    )
    set_filter = filters.create_action(lambda current, value: value)
    open_dialog = dialog.create_action(lambda current, name: name)

    def render(state) -> None:
        visible = [
            t["text"]
            for t in state["todos"]
            if state["filter"] == "all" or t["done"] == (state["filter"] == "done")
        ]
        print(f"[{state['filter']}] {visible} dialog={state['ui'].get('dialog')}")

    unsubscribe = store.subscribe(render)

    add_todo("write docs")
    add_todo("ship release")
    toggle(0)
    set_filter("done")
    open_dialog("confirm")

    # Actions cannot be dispatched from listeners
    store.subscribe(lambda state: set_filter("all"))
    try:
        add_todo("draft changelog")
    except ReentrantDispatchError as exc:
        print(f"Rejected: {exc}")

    unsubscribe()


if __name__ == "__main__":
    main()
