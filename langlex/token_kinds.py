"""The list of token kinds currently recognized.

This is the only place reserved spellings are written down. The keyword
table in keywords.py and the command line listing are built from
`keyword_kinds`.

"""

from langlex.tokens import TokenKind

keyword_kinds = []

as_kw = TokenKind("as", keyword_kinds)
async_kw = TokenKind("async", keyword_kinds)
await_kw = TokenKind("await", keyword_kinds)
break_kw = TokenKind("break", keyword_kinds)
continue_kw = TokenKind("continue", keyword_kinds)
else_kw = TokenKind("else", keyword_kinds)
enum_kw = TokenKind("enum", keyword_kinds)
extern_kw = TokenKind("extern", keyword_kinds)
false_kw = TokenKind("false", keyword_kinds)
fn_kw = TokenKind("fn", keyword_kinds)
for_kw = TokenKind("for", keyword_kinds)
fork_kw = TokenKind("fork", keyword_kinds)
from_kw = TokenKind("from", keyword_kinds)
if_kw = TokenKind("if", keyword_kinds)
impl_kw = TokenKind("impl", keyword_kinds)
in_kw = TokenKind("in", keyword_kinds)
is_kw = TokenKind("is", keyword_kinds)
let_kw = TokenKind("let", keyword_kinds)
loop_kw = TokenKind("loop", keyword_kinds)
match_kw = TokenKind("match", keyword_kinds)
mod_kw = TokenKind("mod", keyword_kinds)
pub_kw = TokenKind("pub", keyword_kinds)
return_kw = TokenKind("return", keyword_kinds)
self_kw = TokenKind("self", keyword_kinds)
selftype_kw = TokenKind("selftype", keyword_kinds)
show_kw = TokenKind("show", keyword_kinds)
struct_kw = TokenKind("struct", keyword_kinds)
trait_kw = TokenKind("trait", keyword_kinds)
true_kw = TokenKind("true", keyword_kinds)
try_kw = TokenKind("try", keyword_kinds)
type_kw = TokenKind("type", keyword_kinds)
unknown_kw = TokenKind("unknown", keyword_kinds)
use_kw = TokenKind("use", keyword_kinds)
void_kw = TokenKind("void", keyword_kinds)
where_kw = TokenKind("where", keyword_kinds)
while_kw = TokenKind("while", keyword_kinds)

identifier = TokenKind()
