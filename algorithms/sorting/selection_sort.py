def selection_step(arr, i):
    """Swaps the minimum of arr[i:] into position i."""
    min_idx = i
    for j in range(i + 1, len(arr)):
        if arr[j] < arr[min_idx]:
            min_idx = j
    arr[i], arr[min_idx] = arr[min_idx], arr[i]


def selection_sort(arr):
    """Sorts arr in place, one minimum per pass. Not stable."""
    n = len(arr)
    for i in range(n - 1):
        selection_step(arr, i)


# --- Example Usage ---
if __name__ == "__main__":
    data = [5, 3, 1, 4, 2]
    selection_sort(data)
    print(data)
