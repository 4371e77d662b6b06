from equity_statistics.data.frames import series_from_pandas, to_frame
