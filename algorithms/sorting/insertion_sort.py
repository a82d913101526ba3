def insertion_sort(arr):
    """Sorts arr in place by growing a sorted prefix one element at a time."""
    n = len(arr)
    for i in range(1, n):
        key = arr[i]
        j = i - 1

        # Shift larger elements of the prefix one slot to the right
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


# --- Example Usage ---
if __name__ == "__main__":
    data = [5, 3, 1, 4, 2]
    insertion_sort(data)
    print(data)
