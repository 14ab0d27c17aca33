# mimecte

`mimecte` models the value of the MIME `Content-Transfer-Encoding` header
field. The value names a *mechanism*, such as `base64` or `quoted-printable`.
Mechanism names are compared without regard to case, as RFC 2045 requires.

## Installation

```
pip install mimecte
```

## Usage

```python
from mimecte.contenttransferencoding import ContentTransferEncoding

cte = ContentTransferEncoding("Base64")

cte.mechanism == ContentTransferEncoding.base64    # True: case is ignored
str(cte)                                           # "Base64": the original text is kept

cte.set("quoted-printable")                        # same as cte.mechanism = "quoted-printable"
cte == ContentTransferEncoding("QUOTED-PRINTABLE") # True
cte == "Quoted-Printable"                          # True: plain strings compare too

clone = cte.copy()                                 # an independent copy
```

`ContentTransferEncoding()` with no argument holds an empty mechanism.
Instances compare equal to other instances and to strings, but are not
hashable.

`ContentTransferEncoding` gives the field label and the standard mechanism
names as class attributes:

| Attribute          | Value                       |
|--------------------|-----------------------------|
| `label`            | `Content-Transfer-Encoding` |
| `base64`           | `base64`                    |
| `quoted_printable` | `quoted-printable`          |
| `binary`           | `binary`                    |
| `sevenbit`         | `7bit`                      |
| `eightbit`         | `8bit`                      |

`CaseInsensitiveStr` is a subclass of `str`. Its equality and its hash ignore
case. The `mechanism` property returns one, so a mechanism also works as a
dictionary key or a set member:

```python
from mimecte.contenttransferencoding import CaseInsensitiveStr

handlers = {CaseInsensitiveStr("base64"): "decode with base64"}
handlers[CaseInsensitiveStr("BASE64")]             # "decode with base64"
```

## What this package does not do

It holds and compares the field value only. It does not encode or decode
message bodies with any of the mechanisms it names, and it does not parse or
write whole message headers.

## Running the tests

```
pip install "mimecte[test]"
pytest
```