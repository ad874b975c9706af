from datetime import datetime
import sqlite3

from crudbuilder import delete_query, insert, select_builder, update_query


CREATE_TABLE_SQL = (
    'CREATE TABLE IF NOT EXISTS todo_item ('
    'id INTEGER PRIMARY KEY AUTOINCREMENT, title VARCHAR(120), created_at TIMESTAMP, is_done BOOLEAN)'
)


def main():
    connection = sqlite3.connect('todos.db')
    connection.isolation_level = None  # autocommit
    connection.execute(CREATE_TABLE_SQL)

    try:
        run_todo_app(connection)
    except KeyboardInterrupt:
        print('\nExiting...')
    finally:
        connection.close()


def run_todo_app(connection):
    print_description()

    commands_with_params = {
        'search': search_items,
        'add': add_item,
        'edit': edit_item,
        'complete': complete_item,
        'remove': remove_item,
    }
    singles_commands = {
        'list': list_items,
        'clean': clean_items,
    }

    while True:
        command = input("$")
        command_args = command.strip().split(maxsplit=1)
        if not command_args:
            continue

        command_name = command_args[0]
        if command_name == 'help':
            print_description()
        elif len(command_args) == 2:
            try:
                handler = commands_with_params[command_name]
            except KeyError:
                print("Unsupported command. Use 'help' to list available commands.")
            else:
                parameter = command_args[1]
                handler(connection, parameter)
        else:
            try:
                handler = singles_commands[command_name]
            except KeyError:
                print("Unsupported command. Use 'help' to list available commands.")
            else:
                handler(connection)


def add_item(connection, title):
    duplicates = select_builder().select_from('todo_item').where_eq('title', title)
    if _fetch(connection, duplicates):
        print("WARNING: duplicated one or more items with the title.")

    query = insert().columns_and_values('todo_item', {
        'title': title,
        'created_at': datetime.now(),
        'is_done': False,
    })
    cursor = connection.execute(*query.as_tuple())
    print("Added new item:", cursor.lastrowid, title)


def list_items(connection):
    query = select_builder().select_from('todo_item').order_by('created_at')
    _display_items(_fetch(connection, query), empty_message="No todos yet.")


def search_items(connection, title):
    query = select_builder().select_from('todo_item').where_like('title', f'%{title}%')
    _display_items(_fetch(connection, query), empty_message="No todos found.")


def edit_item(connection, params):
    param_parts = params.split(maxsplit=1)
    if len(param_parts) < 2:
        print("Missing a title.")
        return

    item_id = _parse_id(param_parts[0])
    if item_id is not None:
        query = update_query().update_table('todo_item').set_values({'title': param_parts[1]}).where_eq('id', item_id)
        _execute_for_item(connection, query, item_id, 'Modified:')


def complete_item(connection, item_id):
    item_id = _parse_id(item_id)
    if item_id is not None:
        query = update_query().update_table('todo_item').set_values({'is_done': True}).where_eq('id', item_id)
        _execute_for_item(connection, query, item_id, 'DONE:')


def remove_item(connection, item_id):
    item_id = _parse_id(item_id)
    if item_id is not None:
        query = delete_query().delete_from('todo_item').where_eq('id', item_id)
        _execute_for_item(connection, query, item_id, 'Item removed:')


def clean_items(connection):
    query = delete_query().delete_from('todo_item').where_eq('is_done', True)
    connection.execute(*query.as_tuple())
    print("Removed done todos.")


def print_description():
    description = """
    TODO application.

    Commands:

    * list - List all todos

    * search [title] - Search a todo by title

    * add [title] - Add a new todo

    * edit [id] [title] - Change a title of the todo

    * complete [id] - Mark the todo as done

    * remove [id] - Remove the todo with specified ID

    * clean - Remove all done todos

    * help - Display help
    """

    print(description.lstrip())


def _fetch(connection, query):
    return connection.execute(query.get_query(), query.get_parameters()).fetchall()


def _execute_for_item(connection, query, item_id, message):
    cursor = connection.execute(*query.as_tuple())
    if cursor.rowcount:
        print(message, item_id)
    else:
        print(f"Item with id {item_id} does not exists.")


def _parse_id(lookup_value):
    try:
        return int(lookup_value)
    except ValueError:
        print("ID should be a number")
        return None


def _display_items(rows, empty_message):
    if not rows:
        print(empty_message)
        return

    print(" | ".join(("ID", "Created at", "Title")))
    for item_id, title, created_at, is_done in rows:
        title = f'[DONE] {title}' if is_done else title
        print(' | '.join((str(item_id), str(created_at), title)))


if __name__ == '__main__':
    main()
