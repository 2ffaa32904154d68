from kungfu import Error, LazyCoroResult, Ok, Result


def recorded[T](calls: list[str], name: str, value: T) -> LazyCoroResult[T, str]:
    """LazyCoroResult that appends `name` to `calls` when awaited."""

    async def run() -> Result[T, str]:
        calls.append(name)
        return Ok(value)

    return LazyCoroResult(run)


def failing(calls: list[str], name: str, error: str) -> LazyCoroResult[bool, str]:
    async def run() -> Result[bool, str]:
        calls.append(name)
        return Error(error)

    return LazyCoroResult(run)


def exploding() -> LazyCoroResult[bool, str]:
    async def run() -> Result[bool, str]:
        raise AssertionError("Shouldn't be evaluated")

    return LazyCoroResult(run)


def never[T]() -> T:
    raise AssertionError("Shouldn't be evaluated")
