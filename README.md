# lights

A small toolkit of game building blocks in Python:

- **`lights.binary`**: tagged little-endian value packing (`Int8`, `Int16`,
  `Int32`, `Int64`, `UInt8` … `UInt64`, `String`, `Packet`). Every value is
  written as a one-byte `TypeIdentifier` followed by its payload; a `Packet`
  adds a tag byte and an 8-byte little-endian body size before the values.
  `read_value` and `read_string` read raw fields back out of a byte string and
  raise `ValueError` when the data is too short.
- **`lights.collision`**: 2D shapes (`Point`, `Circle`, `Rectangle`, `Line`),
  `is_colliding` and `shape_kind`. A test returns a `CollisionResult` with
  `collided`, `contact_points` and `collision_normal`; the result is truthy
  when the shapes touch. Rectangles are axis-aligned and positioned by their
  centre. Line-against-line and line-against-rectangle tests always report no
  collision.
- **`lights.world`**: `World2D`, a physics world holding `Body` objects of
  `BodyType.STATIC`, `DYNAMIC` or `KINEMATIC`. Each `physics_tick(delta_time)`
  lowers the y velocity of dynamic bodies by `GRAVITY * delta_time`, adds the
  velocity to their position, tests them against every other body, pushes them
  out along the collision normal and cancels velocity that points into it.
- **`lights.meshes`**: the `Vertex` layout, fixed quad, cube and pyramid
  meshes (`QUAD_VERTICES`, `CUBE_INDICES`, …), and the generators
  `generate_circle`, `generate_sphere` and `get_normal`.
- **`lights.units`**: conversions between pixels, meters and physics units
  (64 pixels per meter, y flipped on screen), `centered_mouse_position` and
  `screen_to_world_position`.
- **`lights.typegen`** and the `lights-typegen` command: turn type definition
  files into C++ struct and enum headers.
- **`lights.config`**: `Configuration`, which loads `GameParameters` (or any
  class with `from_toml` / `to_toml`) from a TOML file.
- **`lights.messages`**, **`lights.crypto`**, **`lights.database`**,
  **`lights.server`**, **`lights.server_game`** and the `lights-server`
  command: an asyncio TCP login server backed by MongoDB.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Binary packing

```python
from lights.binary import Int8, Int16, String, Packet

assert bytes(Int8(-1)) == b"\x00\xff"
assert int(Int16(-2)) == -2
assert str(String("Ozz World!")) == "Ozz World!"

packet = Packet(Int8(5), String("hi"))
payload = bytes(packet)
assert int(packet[0]) == 5
```

Values out of range wrap to the width of the type, as fixed-width integers do.

## Collision

```python
from lights.collision import Circle, Point, Rectangle, is_colliding

box = Rectangle(position=(0.0, 0.0), size=(2.0, 2.0))
assert is_colliding(box, Point((1.0, 1.0))).collided
assert not is_colliding(box, Circle((2.01, 0.0), 1.0)).collided
```

```python
from lights.collision import Rectangle
from lights.world import BodyType, World2D

world = World2D()
ground = world.create_body(BodyType.STATIC, Rectangle((0.0, -5.0), (20.0, 1.0)))
player = world.create_body(BodyType.DYNAMIC, Rectangle((0.0, 0.0), (1.0, 1.0)))
world.physics_tick(1 / 60)
print(world.get_body(player).position())
```

Body ids are random non-zero 64-bit integers; `get_body` returns `None` for
unknown ids and `destroy_body` ignores them.

## Type generation

A definition file lists structs and enums:

```
// player.ozz
enum Team {
    Red
    Blue
}

struct Player {
    string name
    int score
    float array positions
    Team team
}
```

Field types are `int`, `float`, `double`, `bool` and `string`; any other name
is taken to be another generated type. The word `array` after the type makes
the field a `std::vector`. Blank lines and lines starting with `//` are
skipped. A definition without `struct` or `enum`, or a field without a name,
raises `DefinitionError`.

From Python:

```python
from lights.typegen import generate

with open("player.ozz", encoding="utf-8") as handle:
    header = generate(handle.read())
```

From the command line:

```
lights-typegen player.ozz player.generated.h
```

The command exits with status 1 if a file cannot be read or written or the
definition is invalid.

## Configuration

`Configuration` loads a TOML file into a parameters object, and when the file
does not exist yet it starts from the defaults and, if `save_if_new` is true,
writes them out:

```python
from lights.config import Configuration, GameParameters

config = Configuration("game.toml", GameParameters, True)
print(config.config.fps)
print(config.to_string())
```

The file holds an `[Engine]` table with a float `FPS` (default 120.0), and a
`[Window]` table with `Mode` (0 windowed, 1 borderless fullscreen) and `Size`
(default `[1280, 720]`). `GameParameters.from_toml` raises `ValueError` when a
key is missing or has the wrong type.

## Passwords

Salts are random bytes in upper-case hex; hashes are upper-case hex SHA-512
digests.

```python
from lights.crypto import generate_salt, hash_password, verify_password

password = "password"
salt = generate_salt(32)
stored = hash_password(salt + password)
assert verify_password(salt + password, stored)
```

## Login protocol

Every message begins with a one-byte type tag (`ClientMessageType` or
`ServerMessageType`). Text fields are UTF-8 preceded by an 8-byte
little-endian length. `AuthenticationRequest(email, password)` goes from
client to server; the server answers with `AuthenticationSuccessful(username)`
or `AuthenticationFailed()`, and sends `AccountLoggedInElsewhere()` to an older
connection when the same account logs in again. Use `bytes(message)` to encode
and `decode` / `read_from` to read a message back.

## Login server

`lights.database.Database` keeps `User` records in the `users` collection of a
MongoDB database, with a unique index on `email`. `create_user` salts and
hashes the password before storing it; `login_user` checks the password and
marks the user logged in; `logout_user` clears that mark.

The `lights-server` command connects to MongoDB, then listens for clients and
drops players that disconnected or were replaced once a second:

```
lights-server --uri mongodb://localhost:27017 --database lights --port 1337
```

All three options have these values as their defaults. The command exits with
status 1 if the database cannot be reached. No default user is created; add
accounts with `Database.create_user` or `Database.migrate(default_user)`.

## What it does not do

There is no window, renderer, input handling or game loop for a client: the
mesh data in `lights.meshes` and the conversions in `lights.units` are plain
numbers for whatever draws them. There is no client program for the login
server either; a client has to be written with `lights.messages`.