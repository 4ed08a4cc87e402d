# solidprinciples

Small, self-contained examples of SOLID design principles. Each principle
shown has its own module.

| Module | Principle | What it shows |
| --- | --- | --- |
| `solidprinciples.srp` | Single Responsibility | `UserRepository` stores users. `AuthenticationService` checks their credentials. |
| `solidprinciples.ocp` | Open/Closed | `NotificationSender` works with any `NotificationService`, such as `EmailNotification` or `SmsNotification`. |
| `solidprinciples.dip` | Dependency Inversion | `Processor` depends only on the `Writer` abstraction. `FileWriter` and `NetworkWriter` are two implementations of it. |

## Installation

```
pip install .
```

## Usage

### Single Responsibility

```python
from solidprinciples.srp import AuthenticationService, User, UserNotFoundError, UserRepository

repo = UserRepository()
repo.add_user(User("TWS", "secret"))

auth = AuthenticationService(repo)
auth.authenticate_user("TWS", "secret")    # True
auth.authenticate_user("TWS", "password")  # False

try:
    auth.authenticate_user("nobody", "secret")
except UserNotFoundError:
    print("user not found")
```

`AuthenticationService` copies the list of users when it is created. Users
added to the repository after that point are not known to the service.
`authenticate_user` raises `UserNotFoundError` (a `LookupError`) for an
unknown name and logs a warning through the `solidprinciples.srp` logger.

### Open/Closed

```python
from solidprinciples.ocp import EmailNotification, NotificationSender, SmsNotification

sender = NotificationSender(EmailNotification())
sender.send_notification("Hello World.")   # Email Notification: Hello World.

sender.notification_service = SmsNotification()
sender.send_notification("Hello World.")   # SMS Notification: Hello World.
```

`NotificationSender.send_notification` logs `Sending Notification...` at INFO
level through the `solidprinciples.ocp` logger before it hands the message on.
New channels subclass `NotificationService` and implement `send_notification`.

### Dependency Inversion

```python
from solidprinciples.dip import FileWriter, NetworkWriter, Processor

processor = Processor(FileWriter("data.text"))
processor.process_and_write(b"Hello World.")   # data.text now holds "Hello World."

processor.writer = NetworkWriter("http://localhost:8080")
processor.process_and_write(b"Hello Network.")
# Sending data Hello Network. to http://localhost:8080
```

`FileWriter` replaces any earlier contents of its file. New destinations
subclass `Writer` and implement `write`.

## What the package does not do

- It covers three of the five SOLID principles. There are no examples for
  Liskov substitution or interface segregation.
- `EmailNotification` and `SmsNotification` only print the message; nothing is
  sent by e-mail or SMS.
- `NetworkWriter` only prints what it would send; it opens no connection.
- `UserRepository` keeps users in memory only; nothing is stored on disk.

## Running the tests

```
pip install ".[test]"
pytest
```