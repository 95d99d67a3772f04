"""Elementary comparison sorts. Each returns a new ascending list."""

from collections.abc import Iterable


def bubble_sort(items: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable) -> list:
    """Sort by sinking each element left until its neighbour is not larger."""
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j - 1] > result[j]:
            result[j - 1], result[j] = result[j], result[j - 1]
            j -= 1
    return result


def selection_sort(items: Iterable) -> list:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result