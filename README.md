# inboxdesk

inboxdesk is a small e-mail client that reads mail, users and attachments
from a SQLite database. Its window is modelled as a tree of components:

- a side bar with **Compose**, **Inbox**, **Contact**, **Log-Out** and
  **Quit** buttons that switch the view panel between views;
- an e-mail view with a category list (Inbox, Drafts, Sent Mail, All Mail,
  Spam, Bin, Important, Starred), a search bar and a list of e-mail cards,
  one per stored e-mail;
- a preview pane that shows the subject, sender, recipients, body and
  attachments of the e-mail whose card was previewed;
- a compose view with sender, recipients, subject and body fields, an
  attachment list, and `open_in_new()` for a separate compose window;
- a contacts view listing every user's e-mail address, first and last name.

## Installing

```
pip install .
```

The package has no dependencies outside the Python standard library.
Python 3.10 or later is required.

## Running

```
inboxdesk [DATABASE]
```

`DATABASE` defaults to `Assets/Sql/emails.db`, relative to the current
directory. The client prints the window title, the status message and the
current view, then reads one command per line from standard input:

| command         | effect                                                          |
|-----------------|-----------------------------------------------------------------|
| `inbox`         | show the e-mail view                                            |
| `compose`       | show the compose view                                           |
| `contact`       | show the contacts view                                          |
| `log-out`       | pressed, but no view changes                                    |
| `quit`          | stop reading commands                                           |
| `preview <id>`  | print subject, sender, recipients, body and attachment names    |

Commands are matched without regard to case. After each view command the
client prints `Showing <VIEW>`. Unknown commands, ids that are not numbers and
ids of e-mails that are not listed are reported on standard output. The
client exits with status 1 if the database cannot be opened or the mail in it
cannot be read, and 0 otherwise.

```
$ printf 'contact\npreview 1\nquit\n' | inboxdesk mail.db
Qt Email Client
TRA0163
Showing EMAIL_VIEW
Showing CONTACTS_VIEW
...
```

## The database

The client expects these tables:

| table              | columns used                                                                           |
|--------------------|----------------------------------------------------------------------------------------|
| `user`             | `user_id`, `email`, `first_name`, `last_name`, `created_at`                            |
| `email`            | `email_id`, `sender_id`, `subject`, `body`, `status`, `sent_at`                        |
| `email_recipient`  | `email_id`, `recipient_id`                                                             |
| `attachment`       | `attachment_id`, `attachment_name`, `attachment_path`, `attachment_data`, `created_at` |
| `email_attachment` | `email_id`, `attachment_id`                                                            |

`email.status` holds one of `sent`, `draft`, `deleted` or `sent_draft`; any
other value raises `ValueError` when the e-mail is read
(`inboxdesk.models.email_status_from_string`). When written back with
`email_status_to_string`, `SENT_DRAFT` becomes `draft`.

## Using the library

`inboxdesk.database.DbContext` owns one SQLite connection and can be used as
a context manager. The repositories in `inboxdesk.repositories` read it:

```python
from inboxdesk.database import DbContext
from inboxdesk.models import User
from inboxdesk.repositories import EmailRepo, UserRepo

with DbContext() as db:
    db.connect("mail.db")
    emails = EmailRepo(db)
    users = UserRepo(db)

    for email in emails.all_emails():
        sender = users.get_user(email.sender_id)
        print(sender.email, email.subject)

    new_id = users.add_user(User(email="someone@example.com", first_name="Some", last_name="One"))
```

- `EmailRepo`: `all_emails()`, `get_email(email_id)`
- `UserRepo`: `all_users()`, `get_user(user_id)`, `get_user_by_email(email)`,
  `add_user(user)` (returns the new id), `recipients(email_id)`
- `AttachmentRepo`: `attachments(email_id)`

Looking up an e-mail or user that does not exist raises `LookupError`.
A failed query, or using a `DbContext` that is not open, raises
`inboxdesk.database.DatabaseError`.

Components talk to each other through an `EventBus` and find their services
(the bus, the database context and the repositories) in a
`ServiceContainer`; `inboxdesk.app.build_container(db_path)` builds one with
all of them registered.

```python
from inboxdesk.events import EventBus, PreviewEmailClicked

bus = EventBus()
bus.subscribe(PreviewEmailClicked, lambda event: print("preview", event.email_id))
bus.forward_emit(PreviewEmailClicked, 3)
```

Handlers receive only events of exactly the type they subscribed to, and run
in the order they were subscribed; emitting an event no one listens for does
nothing.

## What it does not do

- There is no graphical window; the client is driven from standard input.
- Mail is never sent or saved. The editor's Send and Save actions emit
  `SendEmailClickedEvent` and `SaveEmailClickedEvent`, but nothing listens
  to them.
- There is no file picker. `EmailEditor` and `ComposeView` take a
  `choose_files` callable; without one, Attach adds no files.
- The search bar, filter and sort frames hold no behaviour, and only the
  inbox list exists; the category list does not change what is listed.
- Log-Out does nothing, and the database schema is not created: the tables
  above must already exist.

## Running the tests

```
pip install .[test]
pytest
```