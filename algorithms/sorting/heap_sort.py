def heapify(arr, n, i):
    """
    Sifts arr[i] down until the subtree rooted at i is a max-heap.

    Only indices below n belong to the heap. The child subtrees of i must
    already satisfy the max-heap property.

    Args:
        arr: Sequence holding the heap.
        n: Current heap size.
        i: Index of the subtree root.
    """
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2

        if left < n and arr[left] > arr[largest]:
            largest = left
        if right < n and arr[right] > arr[largest]:
            largest = right

        if largest == i:
            return

        arr[i], arr[largest] = arr[largest], arr[i]
        i = largest


def build_max_heap(arr):
    n = len(arr)
    for i in range(n // 2 - 1, -1, -1):
        heapify(arr, n, i)


def heap_sort(arr):
    """Sorts arr in place: builds a max-heap, then moves the root to the end repeatedly."""
    build_max_heap(arr)

    for end in range(len(arr) - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        heapify(arr, end, 0)


# --- Example Usage ---
if __name__ == "__main__":
    data = [5, 3, 1, 4, 2]
    heap_sort(data)
    print(data)
